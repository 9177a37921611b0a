"""Response models for API endpoints."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .match import ScoredMatch


def utc_now() -> datetime:
    """Current UTC time for response timestamps."""
    return datetime.now(timezone.utc)


class DrugMatch(BaseModel):
    """One catalog match in the batch search response."""

    model_config = ConfigDict(populate_by_name=True)

    drug_name: str = Field(..., alias="약품명", description="Matched catalog name")
    product_name: Optional[str] = Field(None, alias="제품명", description="Product name")
    ingredient: Optional[str] = Field(None, alias="성분명", description="Ingredient name")
    ingredient_a: Optional[str] = Field(None, alias="성분명_A", description="Secondary ingredient")
    score: int = Field(..., alias="유사도점수", description="Similarity score (0-100)")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Full catalog metadata")

    @classmethod
    def from_scored(cls, match: ScoredMatch) -> "DrugMatch":
        """Build the response shape from an engine match."""
        entry = match.entry
        return cls(
            drug_name=match.matched_name,
            product_name=entry.product_name,
            ingredient=entry.ingredient,
            ingredient_a=entry.ingredient_a,
            score=match.score,
            metadata=entry.attributes,
        )


class BestMatch(BaseModel):
    """Top match for a drug name."""

    model_config = ConfigDict(populate_by_name=True)

    drug_name: str = Field(..., alias="약품명", description="Matched catalog name")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Full catalog metadata")
    score: int = Field(..., alias="유사도점수", description="Similarity score (0-100)")


class DrugSearchResult(BaseModel):
    """Matches for one input drug name."""

    model_config = ConfigDict(populate_by_name=True)

    input_drug_name: str = Field(..., alias="inputDrugName", description="Drug name as sent")
    found: bool = Field(..., description="Whether any match passed the threshold")
    match_count: int = Field(..., alias="matchCount", description="Number of matches returned")
    matches: List[DrugMatch] = Field(..., description="Ranked matches")
    best_match: Optional[BestMatch] = Field(None, alias="bestMatch", description="Top match")

    @classmethod
    def from_matches(cls, query: str, matches: List[ScoredMatch]) -> "DrugSearchResult":
        """Build the per-name result from ranked engine matches."""
        best = None
        if matches:
            top = matches[0]
            best = BestMatch(
                drug_name=top.matched_name,
                metadata=top.entry.attributes,
                score=top.score,
            )
        return cls(
            input_drug_name=query,
            found=bool(matches),
            match_count=len(matches),
            matches=[DrugMatch.from_scored(match) for match in matches],
            best_match=best,
        )


class SearchSummary(BaseModel):
    """Totals across all searched drug names."""

    model_config = ConfigDict(populate_by_name=True)

    total_searched: int = Field(..., alias="totalSearched")
    total_found: int = Field(..., alias="totalFound")
    not_found: List[str] = Field(..., alias="notFound")


class DrugSearchResponse(BaseModel):
    """Response for the batch drug search."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = Field(default=True)
    intent: Optional[str] = Field(None, description="Search intent echoed from the request")
    original_query: Optional[str] = Field(None, alias="originalQuery", description="Original question")
    drug_count: int = Field(..., alias="drugCount", description="Number of drug names searched")
    search_results: List[DrugSearchResult] = Field(..., alias="searchResults")
    summary: SearchSummary
    timestamp: datetime = Field(default_factory=utc_now, description="Response timestamp")


class SingleMatch(BaseModel):
    """A match in the single drug search response."""

    content: str = Field(..., description="Matched catalog name")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Full catalog metadata")
    score: int = Field(..., description="Similarity score (0-100)")
    matched_name: str = Field(..., alias="matchedName")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_scored(cls, match: ScoredMatch) -> "SingleMatch":
        """Build the response shape from an engine match."""
        return cls(
            content=match.entry.name,
            metadata=match.entry.attributes,
            score=match.score,
            matched_name=match.matched_name,
        )


class SingleDrugSearchResponse(BaseModel):
    """Response for the single drug search."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = Field(default=True)
    input_drug_name: str = Field(..., alias="inputDrugName")
    found: bool
    results: List[SingleMatch]
    timestamp: datetime = Field(default_factory=utc_now, description="Response timestamp")


class ErrorResponse(BaseModel):
    """Error response model."""

    success: bool = Field(default=False)
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=utc_now, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    timestamp: datetime = Field(default_factory=utc_now, description="Check timestamp")
