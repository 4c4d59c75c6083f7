"""
Gender inference from first names.
"""
from __future__ import annotations


class GenderInferenceService:
    """Looks names up in the male and female first-name tables."""

    def __init__(self, data):
        self._data = data

    def guess_gender(self, name) -> str | None:
        """Return "m", "f" or None. A name in both tables resolves to "m"."""
        if not isinstance(name, str):
            return None
        if self._data.is_known_male_name(name):
            return "m"
        if self._data.is_known_female_name(name):
            return "f"
        return None
