"""
Services package for name parsing.

This package contains all service classes used by the name parser,
organized by domain responsibility.
"""

from nameguess.services.alternative import AlternativeTokenService
from nameguess.services.cascade import Shape, ShapeCascadeService, build_shapes
from nameguess.services.formatting import NameFormattingService
from nameguess.services.gender import GenderInferenceService
from nameguess.services.initialization import DataInitializationService, NameDataStructures
from nameguess.services.normalization import NormalizationService
from nameguess.types import NameCandidate, NameParserConfig, ParseResult, TableInfo

__all__ = [
    "AlternativeTokenService",
    "DataInitializationService",
    "GenderInferenceService",
    "NameCandidate",
    # Data structures
    "NameDataStructures",
    "NameFormattingService",
    # Types (re-exported for convenience)
    "NameParserConfig",
    "NormalizationService",
    "ParseResult",
    "Shape",
    "ShapeCascadeService",
    "TableInfo",
    "build_shapes",
]
