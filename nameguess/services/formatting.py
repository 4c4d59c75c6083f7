"""
Name formatting service.

Turns a fully accumulated ``NameCandidate`` into the final ``ParseResult``:
resolves gender and assembles the display name.
"""
from __future__ import annotations

from nameguess.types import NameCandidate, ParseResult


class NameFormattingService:
    """Service for assembling parsed names into output records."""

    def __init__(self, gender_service=None):
        self._gender_service = gender_service

    def postprocess(self, candidate: NameCandidate) -> ParseResult:
        """Attach gender and ``full_name``; transient fields are dropped."""
        gender = candidate.gender
        if not gender and self._gender_service is not None:
            gender = self._gender_service.guess_gender(candidate.first_name) or self._gender_service.guess_gender(
                candidate.preferred_name,
            )

        return ParseResult(
            full_name=self.format_full_name(candidate),
            gender=gender or None,
            salutation=candidate.salutation,
            first_name=candidate.first_name,
            preferred_name=candidate.preferred_name,
            middle_names=candidate.middle_names,
            last_name_prefix=candidate.last_name_prefix,
            last_name=candidate.last_name,
            gen_suffix=candidate.gen_suffix,
        )

    def format_full_name(self, candidate: NameCandidate) -> str:
        """Join the display parts of a candidate with single spaces."""
        # A preferred name taken from the displayed middle name is not repeated,
        # e.g. "J. Michael Jackson" rather than "J. (Michael) Michael Jackson"
        preferred = None if candidate.hide_preferred else candidate.preferred_name

        parts = [
            candidate.salutation,
            candidate.first_name,
            f"({preferred})" if preferred else None,
            candidate.middle_names,
            candidate.last_name_prefix,
            candidate.last_name,
            candidate.gen_suffix,
        ]
        return " ".join(part for part in parts if part)

    def capitalize_name_part(self, part: str) -> str:
        """Capitalize only the first letter: "MIKE" -> "Mike", "o'neil" -> "O'neil"."""
        if not part:
            return part
        return part[0].upper() + part[1:].lower()
