"""Structural extractors turning source text into metadata records."""

from __future__ import annotations

from .base import Extractor, Matched, MatchResult, NO_MATCH, NoMatch
from .components import ComponentExtractor, categorize
from .stores import StoreExtractor, is_store_candidate
from .types import TypeExtractor

__all__ = [
    "ComponentExtractor",
    "Extractor",
    "MatchResult",
    "Matched",
    "NO_MATCH",
    "NoMatch",
    "StoreExtractor",
    "TypeExtractor",
    "categorize",
    "is_store_candidate",
]
