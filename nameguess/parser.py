"""
Free-form Human Name Parsing

This module parses names as they appear in contact lists, email headers and
directories into structured records, and guesses gender from the first or
preferred name.

## Overview

The `NameParser` class wires a small pipeline of services:

1. **Normalization**: squashes whitespace, removes stray punctuation and
   trailing professional designations ("CFA", "Ph.D.")
2. **Shape Cascade**: matches the name against an ordered table of shapes,
   peeling honorifics, suffixes and nicknames and re-parsing the remainder
3. **Alternative Tokens**: classifies "(Mike)" or "(MJ)" as a preferred name,
   and refuses to guess for anything else
4. **Formatting**: assembles the display name and attaches the gender

## Usage Examples

```python
from nameguess import guess

result = guess("Mr. Michael (Mike) Jackson Jr.")
# ParseResult(full_name="Michael (Mike) Jackson Jr.", gender="m", ...)
result.first_name    # "Michael"
result["last_name"]  # "Jackson"

guess("Zhaoxuan (Charles) Yang")
# None: "Charles" is neither a nickname nor initials
```

## Error Handling

Nothing is raised for bad input. Non-string input, names matching no shape
and unclassifiable alternative tokens all return None.

## Thread Safety

A parser is immutable after construction; its shape table and name tables
can be shared freely between threads.
"""

from __future__ import annotations

from functools import cache

from nameguess.services import (
    AlternativeTokenService,
    DataInitializationService,
    GenderInferenceService,
    NameDataStructures,
    NameFormattingService,
    NameParserConfig,
    NormalizationService,
    ParseResult,
    ShapeCascadeService,
    TableInfo,
    build_shapes,
)

# ════════════════════════════════════════════════════════════════════════════════
# MAIN NAME PARSER CLASS
# ════════════════════════════════════════════════════════════════════════════════


class NameParser:
    """Main name parsing service."""

    def __init__(self, config: NameParserConfig | None = None, data: NameDataStructures | None = None):
        self._config = config or NameParserConfig.create_default()
        self._data = data or DataInitializationService(self._config).initialize_data_structures()

        self._normalizer = NormalizationService(self._config)
        self._gender_service = GenderInferenceService(self._data)
        self._formatting_service = NameFormattingService(self._gender_service)
        self._alternative_service = AlternativeTokenService(self._config, self._data, self._formatting_service)
        self._cascade = ShapeCascadeService(
            self._normalizer,
            self._formatting_service,
            build_shapes(self._alternative_service),
        )

    # Public API methods
    def guess(self, name, params=None) -> ParseResult | None:
        """
        Main API method: parse a free-form name.

        Returns a ParseResult, or None when the input is not a string or the
        name cannot be parsed with confidence.
        """
        return self._cascade.guess(name, params)

    def guess_all(self, names) -> list[ParseResult | None]:
        """Parse several names, keeping input order."""
        return [self.guess(name) for name in names]

    def guess_gender(self, name) -> str | None:
        """Guess "m" or "f" from a first name."""
        return self._gender_service.guess_gender(name)

    def normalize(self, name) -> str | None:
        """Clean a raw name the way the parser does before matching."""
        return self._normalizer.preprocess(name)

    def get_table_info(self) -> TableInfo:
        """Get name table sizes."""
        return self._data.table_info()


@cache
def default_parser() -> NameParser:
    """Shared parser with the packaged configuration and tables."""
    return NameParser()


def guess(name) -> ParseResult | None:
    return default_parser().guess(name)


def guess_gender(name) -> str | None:
    return default_parser().guess_gender(name)
