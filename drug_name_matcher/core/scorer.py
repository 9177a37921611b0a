"""Similarity scoring between a query and a drug name."""

import math
from enum import Enum
from typing import Optional, Union

import structlog

from .distance import levenshtein_distance
from .hangul import extract_initials
from .normalizer import TextNormalizer

logger = structlog.get_logger(__name__)

EXACT_SCORE = 100
SUBSTRING_BASE_SCORE = 85
SUBSTRING_SPAN = 10
DIRECT_WEIGHT = 0.7
INITIAL_WEIGHT = 0.3


class MatchAlgorithm(str, Enum):
    """Supported scoring algorithms."""

    EDIT_DISTANCE = "edit-distance"
    INITIAL = "initial"
    COMBINED = "combined"


# Older clients send "levenshtein" for the edit-distance algorithm
_ALGORITHM_ALIASES = {
    "levenshtein": MatchAlgorithm.EDIT_DISTANCE,
}


def resolve_algorithm(value: Union[str, MatchAlgorithm, None]) -> MatchAlgorithm:
    """
    Resolve an algorithm selector, falling back to combined for unknown values.

    Args:
        value: Algorithm name, enum member or None

    Returns:
        The matching MatchAlgorithm
    """
    if isinstance(value, MatchAlgorithm):
        return value
    if value is None:
        return MatchAlgorithm.COMBINED

    key = str(value).strip().lower()
    if key in _ALGORITHM_ALIASES:
        return _ALGORITHM_ALIASES[key]
    try:
        return MatchAlgorithm(key)
    except ValueError:
        logger.warning("algorithm_fallback", requested=value, using=MatchAlgorithm.COMBINED.value)
        return MatchAlgorithm.COMBINED


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return int(math.floor(value + 0.5))


class SimilarityScorer:
    """Scores how closely two drug names resemble each other on a 0-100 scale."""

    def __init__(self, normalizer: Optional[TextNormalizer] = None) -> None:
        self.normalizer = normalizer or TextNormalizer()

    def similarity(self, text1: Optional[str], text2: Optional[str]) -> float:
        """
        Direct similarity between two strings.

        Exact matches score 100. When one string contains the other the
        score lands in (85, 95] depending on how much of the longer string
        is covered. Everything else is scored by Levenshtein distance
        relative to the longer string's length.

        Args:
            text1: First string
            text2: Second string

        Returns:
            Similarity score between 0 and 100
        """
        if not text1 or not text2:
            return 0.0

        a = self.normalizer.fold(text1)
        b = self.normalizer.fold(text2)

        if a == b:
            return float(EXACT_SCORE)

        shorter, longer = (a, b) if len(a) <= len(b) else (b, a)
        if shorter and shorter in longer:
            return SUBSTRING_BASE_SCORE + (len(shorter) / len(longer)) * SUBSTRING_SPAN

        max_len = max(len(a), len(b))
        if max_len == 0:
            return float(EXACT_SCORE)

        distance = levenshtein_distance(a, b)
        return float(max(0, round_half_up((max_len - distance) / max_len * 100)))

    def initial_similarity(self, text1: Optional[str], text2: Optional[str]) -> float:
        """Similarity between the Hangul initial-consonant skeletons of two strings."""
        return self.similarity(extract_initials(text1 or ""), extract_initials(text2 or ""))

    def score(
        self,
        query: Optional[str],
        target: Optional[str],
        algorithm: Union[str, MatchAlgorithm] = MatchAlgorithm.COMBINED,
    ) -> int:
        """
        Score a query against a target name using the selected algorithm.

        Args:
            query: Query string
            target: Candidate name
            algorithm: edit-distance, initial or combined (unknown values
                fall back to combined)

        Returns:
            Integer score between 0 and 100
        """
        algorithm = resolve_algorithm(algorithm)

        if algorithm is MatchAlgorithm.EDIT_DISTANCE:
            raw = self.similarity(query, target)
        elif algorithm is MatchAlgorithm.INITIAL:
            raw = self.initial_similarity(query, target)
        else:
            raw = (
                self.similarity(query, target) * DIRECT_WEIGHT
                + self.initial_similarity(query, target) * INITIAL_WEIGHT
            )

        return min(EXACT_SCORE, max(0, round_half_up(raw)))
