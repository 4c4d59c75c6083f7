"""
Access to the CSV name tables.

Tables ship inside the ``nameguess.data`` package and are read through
``importlib.resources``; a directory on disk can be used instead by passing
``data_dir``.
"""
from __future__ import annotations

import csv
import io
from collections.abc import Iterator
from importlib.resources import files
from pathlib import Path

from nameguess.paths import DATA_PACKAGE


def resource_path(filename: str, data_dir: str | None = None):
    """Return a traversable path for a table file."""
    if data_dir is not None:
        return Path(data_dir) / filename
    return files(DATA_PACKAGE) / filename


def open_csv_reader(filename: str, data_dir: str | None = None) -> Iterator[dict[str, str]]:
    """Yield rows of a table as dicts, skipping blank lines and ``#`` comments."""
    text = resource_path(filename, data_dir).read_text(encoding="utf-8")
    lines = (line for line in io.StringIO(text) if line.strip() and not line.lstrip().startswith("#"))
    yield from csv.DictReader(lines)
