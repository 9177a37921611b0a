"""
Drug Name Matcher - fuzzy matching of user-supplied drug names to a reference catalog.

This package maps noisy drug-name strings (typos, spacing, dosage suffixes,
Korean initial-consonant shorthand) to canonical catalog entries using
Levenshtein similarity blended with Hangul initial-consonant similarity.
"""

__version__ = "1.0.0"

from .core.engine import MatchConfig, MatchEngine
from .models.match import CatalogEntry, ScoredMatch

__all__ = [
    "MatchEngine",
    "MatchConfig",
    "CatalogEntry",
    "ScoredMatch",
]
