"""Drug name match engine: normalize, score, filter, rank and limit."""

import math
import numbers
import time
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, Tuple, Union

import structlog

from ..models.match import CatalogEntry, ScoredMatch
from .exceptions import InvalidInputError
from .hangul import is_initials_only
from .normalizer import TextNormalizer
from .scorer import MatchAlgorithm, SimilarityScorer, resolve_algorithm

logger = structlog.get_logger(__name__)

DEFAULT_THRESHOLD = 30
DEFAULT_LIMIT = 5


@dataclass(frozen=True)
class MatchConfig:
    """Per-search configuration."""

    algorithm: Union[str, MatchAlgorithm] = MatchAlgorithm.COMBINED
    threshold: Union[int, float] = DEFAULT_THRESHOLD
    limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        if isinstance(self.threshold, bool) or not isinstance(self.threshold, numbers.Real):
            raise InvalidInputError("threshold", self.threshold, "must be a number")
        if math.isnan(self.threshold):
            raise InvalidInputError("threshold", self.threshold, "must be a number")
        if isinstance(self.limit, bool) or not isinstance(self.limit, numbers.Integral):
            raise InvalidInputError("limit", self.limit, "must be an integer")
        if self.limit <= 0:
            raise InvalidInputError("limit", self.limit, "must be a positive integer")
        # Unknown names are not an error: they resolve to combined
        object.__setattr__(self, "algorithm", resolve_algorithm(self.algorithm))


@dataclass(frozen=True)
class ComparisonTrace:
    """One query/entry comparison, handed to the engine's trace hook."""

    query: str
    normalized_query: str
    name: str
    normalized_name: str
    algorithm: MatchAlgorithm
    score: int
    accepted: bool


TraceHook = Callable[[ComparisonTrace], None]


class MatchEngine:
    """Ranks catalog entries by similarity to a drug name query."""

    def __init__(
        self,
        scorer: Optional[SimilarityScorer] = None,
        normalizer: Optional[TextNormalizer] = None,
        on_compare: Optional[TraceHook] = None,
    ) -> None:
        """
        Initialize the match engine.

        Args:
            scorer: Similarity scorer (a default one is created if None)
            normalizer: Text normalizer applied to queries and names
            on_compare: Optional callback receiving a ComparisonTrace for
                every scored catalog entry
        """
        self.normalizer = normalizer or TextNormalizer()
        self.scorer = scorer or SimilarityScorer(self.normalizer)
        self.on_compare = on_compare

    def search(
        self,
        catalog: Iterable,
        query: str,
        config: Optional[MatchConfig] = None,
    ) -> List[ScoredMatch]:
        """
        Search the catalog for entries matching a drug name.

        Names and the query are compared in normalized form. Entries scoring
        below the threshold are dropped, the rest are sorted by score
        (highest first, catalog order among equal scores) and cut to the
        configured limit.

        Args:
            catalog: Iterable of CatalogEntry records
            query: Raw drug name typed by the user
            config: Algorithm, threshold and limit (defaults if None)

        Returns:
            Ranked list of ScoredMatch, possibly empty

        Raises:
            InvalidInputError: If the query, catalog or config is malformed
        """
        start_time = time.time()

        config = self._validate_config(config)
        entries = self._validate_catalog(catalog)
        if not isinstance(query, str):
            raise InvalidInputError("query", query, "must be a string")

        if not query.strip():
            return []

        normalized_query = self.normalizer.normalize(query)
        algorithm = config.algorithm

        scored = []
        for entry in entries:
            normalized_name = self.normalizer.normalize(entry.name)
            score = self.scorer.score(normalized_query, normalized_name, algorithm)
            accepted = score >= config.threshold

            if self.on_compare is not None:
                self.on_compare(
                    ComparisonTrace(
                        query=query,
                        normalized_query=normalized_query,
                        name=entry.name,
                        normalized_name=normalized_name,
                        algorithm=algorithm,
                        score=score,
                        accepted=accepted,
                    )
                )

            if accepted:
                scored.append(
                    ScoredMatch(
                        entry=entry,
                        score=score,
                        matched_name=entry.name,
                        normalized_name=normalized_name,
                    )
                )

        # list.sort is stable, so equal scores keep catalog order
        scored.sort(key=lambda match: match.score, reverse=True)
        results = scored[:config.limit]

        logger.debug(
            "search_completed",
            query=query,
            algorithm=algorithm.value,
            initials_query=is_initials_only(query),
            threshold=config.threshold,
            limit=config.limit,
            catalog_size=len(entries),
            passed_threshold=len(scored),
            returned=len(results),
            best_score=results[0].score if results else None,
            execution_time_ms=round((time.time() - start_time) * 1000, 3),
        )

        return results

    def search_many(
        self,
        catalog: Iterable,
        queries: Sequence[str],
        config: Optional[MatchConfig] = None,
    ) -> List[Tuple[str, List[ScoredMatch]]]:
        """
        Run one search per query against the same catalog.

        Args:
            catalog: Iterable of CatalogEntry records
            queries: Raw drug names
            config: Shared search configuration

        Returns:
            List of (query, matches) pairs in input order
        """
        if isinstance(queries, (str, bytes)) or not isinstance(queries, Iterable):
            raise InvalidInputError("queries", queries, "must be a sequence of strings")

        queries = list(queries)
        for index, query in enumerate(queries):
            if not isinstance(query, str):
                raise InvalidInputError(f"queries[{index}]", query, "must be a string")

        config = self._validate_config(config)
        # Materialize once so a one-shot iterator serves every query
        entries = self._validate_catalog(catalog)
        return [(query, self.search(entries, query, config)) for query in queries]

    def _validate_config(self, config: Any) -> MatchConfig:
        if config is None:
            return MatchConfig()
        if not isinstance(config, MatchConfig):
            raise InvalidInputError("config", config, "must be a MatchConfig")
        return config

    def _validate_catalog(self, catalog: Any) -> Tuple[CatalogEntry, ...]:
        if isinstance(catalog, (str, bytes, Mapping)) or not isinstance(catalog, Iterable):
            raise InvalidInputError("catalog", catalog, "must be a sequence of catalog entries")

        entries = tuple(catalog)
        for index, entry in enumerate(entries):
            if not isinstance(entry, CatalogEntry):
                raise InvalidInputError(f"catalog[{index}]", entry, "must be a CatalogEntry")
        return entries
