"""
Types package for name parsing.

This package contains result types, configuration classes, and other
data structures used throughout the name parser.
"""

from nameguess.types.config import NameParserConfig
from nameguess.types.results import STRUCTURAL_FIELDS, NameCandidate, ParseResult, TableInfo

__all__ = [
    "STRUCTURAL_FIELDS",
    "NameCandidate",
    "NameParserConfig",
    "ParseResult",
    "TableInfo",
]
