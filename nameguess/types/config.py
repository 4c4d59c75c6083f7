"""
Immutable parser configuration.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, replace

from nameguess.patterns import REDUNDANT_DESIGNATIONS


def _build_designation_regex(designations: tuple[str, ...]) -> re.Pattern[str]:
    """Compile the trailing-credential matcher, longest designation first."""
    escaped = [re.escape(d) for d in sorted(designations, key=len, reverse=True)]
    return re.compile(rf"(?P<repeat>.*[^\s,])[\s,]+(?:{'|'.join(escaped)})")


@dataclass(frozen=True)
class NameParserConfig:
    """Immutable configuration: data locations and precompiled patterns."""

    # Name tables; None means the CSVs packaged in nameguess.data
    data_dir: str | None
    first_names_file: str
    diminutives_file: str

    designations: tuple[str, ...]

    # Normalizer passes, applied in this order
    whitespace_pattern: re.Pattern[str]
    space_before_comma_pattern: re.Pattern[str]
    orphaned_dot_pattern: re.Pattern[str]
    trailing_comma_pattern: re.Pattern[str]

    designation_pattern: re.Pattern[str]
    initialism_pattern: re.Pattern[str]

    @classmethod
    def create_default(cls) -> NameParserConfig:
        """Factory method for the default configuration."""
        return cls(
            data_dir=None,
            first_names_file="first_names.csv",
            diminutives_file="diminutives.csv",
            designations=REDUNDANT_DESIGNATIONS,
            whitespace_pattern=re.compile(r"\s+"),
            space_before_comma_pattern=re.compile(r"\s+,"),
            orphaned_dot_pattern=re.compile(r"\s\.(?=\s)"),
            trailing_comma_pattern=re.compile(r"(?<!,),+\Z"),
            designation_pattern=_build_designation_regex(REDUNDANT_DESIGNATIONS),
            initialism_pattern=re.compile(r"[A-Z]{2}"),
        )

    def with_designations(self, designations) -> NameParserConfig:
        """Immutable update of the redundant-designation set."""
        designations = tuple(d for d in designations if d)
        if not designations:
            raise ValueError("at least one designation is required")
        return replace(
            self,
            designations=designations,
            designation_pattern=_build_designation_regex(designations),
        )

    def with_data_dir(self, data_dir) -> NameParserConfig:
        """Immutable update pointing the name tables at a directory on disk."""
        return replace(self, data_dir=str(data_dir) if data_dir is not None else None)
