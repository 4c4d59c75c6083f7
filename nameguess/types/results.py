"""
Result types for name parsing.

``NameCandidate`` is the accumulator threaded through recursive cascade calls;
``ParseResult`` is the immutable record handed back to callers.
"""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, fields, replace

# Structural fields emitted in a ParseResult, in display order
STRUCTURAL_FIELDS = (
    "salutation",
    "first_name",
    "preferred_name",
    "middle_names",
    "last_name_prefix",
    "last_name",
    "gen_suffix",
)


@dataclass(frozen=True)
class NameCandidate:
    """Partially parsed name accumulated across cascade levels."""

    salutation: str | None = None
    first_name: str | None = None
    preferred_name: str | None = None
    hide_preferred: bool = False
    middle_names: str | None = None
    last_name_prefix: str | None = None
    last_name: str | None = None
    gen_suffix: str | None = None
    gender: str | None = None
    # Unparsed remainder for the next recursion
    repeat: str | None = None

    @classmethod
    def field_names(cls) -> frozenset[str]:
        return frozenset(f.name for f in fields(cls))

    @classmethod
    def from_mapping(cls, mapping) -> NameCandidate | None:
        """Build a candidate from a field mapping; None if it is not one."""
        if not isinstance(mapping, Mapping):
            return None
        if not cls.field_names().issuperset(mapping):
            return None
        values = {}
        for key, value in mapping.items():
            if key == "hide_preferred":
                values[key] = bool(value)
            elif value is None or isinstance(value, str):
                values[key] = value or None
            else:
                return None
        return cls(**values)

    def merge(self, other: NameCandidate) -> NameCandidate:
        """Outer-wins merge: values already on ``self`` are kept, ``other`` fills the gaps."""
        values = {}
        for f in fields(self):
            if f.name == "hide_preferred":
                continue
            mine = getattr(self, f.name)
            values[f.name] = mine if mine else getattr(other, f.name)
        # The flag belongs to whichever side supplied the preferred name
        values["hide_preferred"] = self.hide_preferred if self.preferred_name else other.hide_preferred
        return NameCandidate(**values)

    def without_repeat(self) -> NameCandidate:
        return replace(self, repeat=None)


@dataclass(frozen=True)
class ParseResult(Mapping):
    """
    Parsed name record.

    Also a read-only mapping: ``full_name`` and ``gender`` are always present,
    structural fields only when the matched shape produced them.
    """

    full_name: str
    gender: str | None = None
    salutation: str | None = None
    first_name: str | None = None
    preferred_name: str | None = None
    middle_names: str | None = None
    last_name_prefix: str | None = None
    last_name: str | None = None
    gen_suffix: str | None = None

    def __getitem__(self, key: str):
        if key in ("full_name", "gender"):
            return getattr(self, key)
        if key in STRUCTURAL_FIELDS:
            value = getattr(self, key)
            if value is not None:
                return value
        raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        yield "full_name"
        yield "gender"
        for name in STRUCTURAL_FIELDS:
            if getattr(self, name) is not None:
                yield name

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def to_dict(self) -> dict[str, str | None]:
        return dict(self.items())


@dataclass(frozen=True)
class TableInfo:
    """Immutable name table size information."""

    male_names: int
    female_names: int
    diminutives: int
