"""Core matching engine functionality."""

from .distance import levenshtein_distance
from .engine import ComparisonTrace, MatchConfig, MatchEngine
from .exceptions import CatalogUnavailableError, InvalidInputError, MatcherError
from .hangul import extract_initials
from .normalizer import TextNormalizer
from .scorer import MatchAlgorithm, SimilarityScorer, resolve_algorithm

__all__ = [
    "MatchEngine",
    "MatchConfig",
    "ComparisonTrace",
    "SimilarityScorer",
    "MatchAlgorithm",
    "resolve_algorithm",
    "TextNormalizer",
    "extract_initials",
    "levenshtein_distance",
    "MatcherError",
    "InvalidInputError",
    "CatalogUnavailableError",
]
