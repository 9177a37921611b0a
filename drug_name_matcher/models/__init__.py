"""Data models for the drug name matcher."""

from .match import CatalogEntry, ScoredMatch
from .request import DrugSearchRequest
from .response import (
    BestMatch,
    DrugMatch,
    DrugSearchResponse,
    DrugSearchResult,
    ErrorResponse,
    HealthResponse,
    SearchSummary,
    SingleDrugSearchResponse,
    SingleMatch,
)

__all__ = [
    "CatalogEntry",
    "ScoredMatch",
    "DrugSearchRequest",
    "DrugSearchResponse",
    "DrugSearchResult",
    "DrugMatch",
    "BestMatch",
    "SearchSummary",
    "SingleDrugSearchResponse",
    "SingleMatch",
    "ErrorResponse",
    "HealthResponse",
]
