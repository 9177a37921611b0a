"""Domain models shared by the catalog, the engine and the API."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class CatalogEntry(BaseModel):
    """A canonical drug record from the reference catalog."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Canonical drug name used for matching")
    attributes: Dict[str, Any] = Field(default_factory=dict, description="Opaque metadata payload")
    product_name: Optional[str] = Field(None, description="Product name resolved from metadata")
    ingredient: Optional[str] = Field(None, description="Ingredient name resolved from metadata")
    ingredient_a: Optional[str] = Field(None, description="Secondary ingredient name (성분명A)")


class ScoredMatch(BaseModel):
    """A catalog entry scored against one query."""

    model_config = ConfigDict(frozen=True)

    entry: CatalogEntry = Field(..., description="The matched catalog entry")
    score: int = Field(..., ge=0, le=100, description="Similarity score (0-100)")
    matched_name: str = Field(..., description="Raw name of the matched entry")
    normalized_name: str = Field(..., description="Normalized form the score was computed on")
