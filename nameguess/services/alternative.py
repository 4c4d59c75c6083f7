"""
Alternative-token resolution.

A token found in parentheses or quotes next to a given name, as in
"Michael (Mike) Jackson", is either a nickname or a set of initials. Anything
else (a translated given name, an alternative surname) is left unparsed.
"""
from __future__ import annotations

from nameguess.paths import logger


class AlternativeTokenService:
    """Classifies parenthesized/quoted alternative tokens."""

    def __init__(self, config, data, formatter):
        self._config = config
        self._data = data
        self._formatter = formatter

    def resolve(self, params: dict[str, str]) -> dict[str, str] | None:
        """
        Fold ``alternative`` into ``preferred_name`` or reject the shape.

        Returns the params without ``alternative``; None when the token is
        neither a known diminutive nor an initialism.
        """
        params = dict(params)
        token = params.pop("alternative", None)
        if not token:
            return params

        if self._data.is_known_diminutive(token):
            params["preferred_name"] = self._formatter.capitalize_name_part(token)
            return params

        if self._config.initialism_pattern.search(token):
            params["preferred_name"] = token
            return params

        # Cases such as "Zhaoxuan (Charles) Yang" or "Celestine (Johnson) Schnugg"
        logger.debug(f"Cannot classify alternative token {token!r}")
        return None
