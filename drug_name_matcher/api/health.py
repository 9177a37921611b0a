"""Health check API endpoints."""

import time
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ..engine_instance import catalog_store
from ..models.response import HealthResponse

router = APIRouter(tags=["health"])

# Track application start time
app_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check that the service is up"
)
async def health_check() -> HealthResponse:
    """Report that the service is alive."""
    return HealthResponse(status="ok")


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Check if a drug catalog is loaded and searches can be served"
)
async def readiness_check() -> JSONResponse:
    """
    Check if the service is ready to accept search requests.

    The service is ready once a non-empty catalog is loaded.
    """
    timestamp = datetime.now(timezone.utc).isoformat()

    if catalog_store.size == 0:
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "catalog_size": 0,
                "timestamp": timestamp
            }
        )

    return JSONResponse(
        status_code=200,
        content={
            "status": "ready",
            "catalog_size": catalog_store.size,
            "catalog_source": catalog_store.source,
            "uptime": time.time() - app_start_time,
            "timestamp": timestamp
        }
    )
