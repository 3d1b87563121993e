"""
Language-Specific Extractors

Each extractor implements the LanguageExtractor interface for a specific language.
"""

from structmeta.ast.extractors.base import LanguageExtractor
from structmeta.ast.extractors.go import GoExtractor

__all__ = [
    "LanguageExtractor",
    "GoExtractor",
]
