"""
Data initialization service for name parsing.

This module loads the first-name and diminutive tables and builds the
immutable lookup structures shared by the gender and alternative-token
services.
"""
from __future__ import annotations

from dataclasses import dataclass

from nameguess.paths import logger
from nameguess.resources import open_csv_reader
from nameguess.types import NameParserConfig, TableInfo


def _fold(text) -> str | None:
    if not isinstance(text, str):
        return None
    return text.strip().lower()


@dataclass(frozen=True)
class NameDataStructures:
    """Immutable container for the name tables."""

    male_names: frozenset[str]
    female_names: frozenset[str]

    # diminutive -> full forms it is short for, e.g. "mike" -> ("michael",)
    diminutive_to_names: dict[str, tuple[str, ...]]

    def is_known_male_name(self, text) -> bool:
        return _fold(text) in self.male_names

    def is_known_female_name(self, text) -> bool:
        return _fold(text) in self.female_names

    def is_known_diminutive(self, text) -> bool:
        return _fold(text) in self.diminutive_to_names

    def table_info(self) -> TableInfo:
        return TableInfo(
            male_names=len(self.male_names),
            female_names=len(self.female_names),
            diminutives=len(self.diminutive_to_names),
        )


class DataInitializationService:
    """Service to initialize all name data structures."""

    def __init__(self, config: NameParserConfig):
        self._config = config

    def initialize_data_structures(self) -> NameDataStructures:
        """Initialize all immutable data structures."""
        male_names, female_names = self._build_first_name_data()
        diminutive_to_names = self._build_diminutive_data()

        data = NameDataStructures(
            male_names=male_names,
            female_names=female_names,
            diminutive_to_names=diminutive_to_names,
        )
        info = data.table_info()
        logger.info(
            f"Loaded name tables: {info.male_names} male, {info.female_names} female, "
            f"{info.diminutives} diminutives",
        )
        return data

    def _build_first_name_data(self) -> tuple[frozenset[str], frozenset[str]]:
        """Split first_names.csv into male and female sets."""
        male, female = set(), set()
        for row in open_csv_reader(self._config.first_names_file, self._config.data_dir):
            name = _fold(row["name"])
            gender = _fold(row["gender"])
            if not name:
                continue
            if gender == "m":
                male.add(name)
            elif gender == "f":
                female.add(name)
            else:
                logger.warning(f"Ignoring first name {name!r} with unknown gender {row['gender']!r}")
        return frozenset(male), frozenset(female)

    def _build_diminutive_data(self) -> dict[str, tuple[str, ...]]:
        """Group diminutives.csv rows by diminutive."""
        grouped: dict[str, list[str]] = {}
        for row in open_csv_reader(self._config.diminutives_file, self._config.data_dir):
            diminutive = _fold(row["diminutive"])
            if not diminutive:
                continue
            full_names = grouped.setdefault(diminutive, [])
            full_name = _fold(row.get("name"))
            if full_name and full_name not in full_names:
                full_names.append(full_name)
        return {diminutive: tuple(names) for diminutive, names in grouped.items()}
