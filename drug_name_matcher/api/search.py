"""Drug search API endpoints."""

from typing import Optional

import structlog
from fastapi import APIRouter, HTTPException, Path, Query

from ..config import get_settings
from ..core.engine import MatchConfig
from ..core.scorer import MatchAlgorithm
from ..engine_instance import catalog_store, match_engine
from ..models.request import DrugSearchRequest
from ..models.response import (
    DrugSearchResponse,
    DrugSearchResult,
    SearchSummary,
    SingleDrugSearchResponse,
    SingleMatch,
)

router = APIRouter(prefix="/api", tags=["search"])
settings = get_settings()
logger = structlog.get_logger(__name__)


@router.post(
    "/search-drugs",
    response_model=DrugSearchResponse,
    summary="Search several drug names",
    description="Match each drug name against the catalog and return ranked candidates"
)
async def search_drugs(request: DrugSearchRequest) -> DrugSearchResponse:
    """
    Search the catalog for every drug name in the request.

    Each name is matched independently with the same algorithm, threshold
    and limit. Names without any match are listed in the summary.
    """
    if len(request.drug_names) > settings.max_batch_size:
        raise HTTPException(
            status_code=400,
            detail=f"Too many drug names. Maximum is {settings.max_batch_size}"
        )

    for drug_name in request.drug_names:
        if len(drug_name) > settings.max_query_length:
            raise HTTPException(
                status_code=400,
                detail=f"Drug name too long. Maximum length is {settings.max_query_length} characters"
            )

    catalog = catalog_store.require_entries()
    config = MatchConfig(
        algorithm=request.algorithm or settings.default_algorithm,
        threshold=request.threshold if request.threshold is not None else settings.default_threshold,
        limit=request.limit or settings.default_limit,
    )

    search_results = [
        DrugSearchResult.from_matches(query, matches)
        for query, matches in match_engine.search_many(catalog, request.drug_names, config)
    ]
    not_found = [result.input_drug_name for result in search_results if not result.found]

    logger.info(
        "drug_search",
        drug_count=len(request.drug_names),
        found=len(search_results) - len(not_found),
        algorithm=config.algorithm.value,
        threshold=config.threshold,
        limit=config.limit,
    )

    return DrugSearchResponse(
        intent=request.intent,
        original_query=request.question_summary,
        drug_count=len(request.drug_names),
        search_results=search_results,
        summary=SearchSummary(
            total_searched=len(request.drug_names),
            total_found=len(search_results) - len(not_found),
            not_found=not_found,
        ),
    )


@router.get(
    "/search-drug/{drug_name}",
    response_model=SingleDrugSearchResponse,
    summary="Search one drug name",
    description="Match a single drug name with the combined algorithm"
)
async def search_drug(
    drug_name: str = Path(..., description="The drug name to search for", min_length=1),
    limit: Optional[int] = Query(None, ge=1, le=100, description="Maximum number of matches"),
    threshold: Optional[int] = Query(None, ge=0, le=100, description="Minimum similarity score"),
) -> SingleDrugSearchResponse:
    """Search the catalog for a single drug name."""
    if len(drug_name) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )

    catalog = catalog_store.require_entries()
    config = MatchConfig(
        algorithm=MatchAlgorithm.COMBINED,
        threshold=threshold if threshold is not None else settings.default_threshold,
        limit=limit or settings.default_limit,
    )

    matches = match_engine.search(catalog, drug_name, config)

    return SingleDrugSearchResponse(
        input_drug_name=drug_name,
        found=bool(matches),
        results=[SingleMatch.from_scored(match) for match in matches],
    )
