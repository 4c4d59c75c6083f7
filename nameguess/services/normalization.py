"""
Normalization service for name parsing.

Cleans whitespace and punctuation artifacts from raw input and strips trailing
professional designations ("CFA", "Ph.D.") before structural parsing.
"""
from __future__ import annotations

from nameguess.types import NameParserConfig


class NormalizationService:
    """Pure normalization service."""

    def __init__(self, config: NameParserConfig):
        self._config = config

    def normalize(self, text) -> str | None:
        """
        Squash whitespace, drop stray punctuation and trailing commas.

        Passes are repeated until the text is stable, so the result is a fixed
        point: ``normalize(normalize(x)) == normalize(x)``. Non-strings give None.
        """
        if not isinstance(text, str):
            return None

        while True:
            cleaned = self._normalize_once(text)
            if cleaned == text:
                return cleaned
            text = cleaned

    def _normalize_once(self, text: str) -> str:
        config = self._config
        text = text.strip()
        text = config.whitespace_pattern.sub(" ", text)
        text = config.space_before_comma_pattern.sub(",", text)
        text = config.orphaned_dot_pattern.sub("", text)
        return config.trailing_comma_pattern.sub("", text)

    def strip_designations(self, text: str) -> str:
        """Remove trailing credentials, re-normalizing after each one."""
        while True:
            match = self._config.designation_pattern.fullmatch(text)
            if match is None:
                return text
            text = self.normalize(match.group("repeat"))

    def preprocess(self, text) -> str | None:
        """Normalize, then strip redundant designations."""
        normalized = self.normalize(text)
        if normalized is None:
            return None
        return self.strip_designations(normalized)
