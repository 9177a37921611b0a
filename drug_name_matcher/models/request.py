"""Request models for API endpoints."""

from typing import List, Optional

from pydantic import BaseModel, Field


class DrugSearchRequest(BaseModel):
    """Request model for searching several drug names at once.

    Blank names are accepted and reported as not found.
    """

    drug_names: List[str] = Field(
        ..., min_length=1, description="Drug names to look up"
    )
    intent: Optional[str] = Field(None, description="Search intent passed through to the response")
    question_summary: Optional[str] = Field(
        None, description="Original user question passed through to the response"
    )
    algorithm: Optional[str] = Field(
        None, description="Scoring algorithm: 'levenshtein', 'edit-distance', 'initial' or 'combined'"
    )
    threshold: Optional[int] = Field(
        None, ge=0, le=100, description="Minimum similarity score (0-100)"
    )
    limit: Optional[int] = Field(
        None, ge=1, le=100, description="Maximum number of matches per drug name"
    )
