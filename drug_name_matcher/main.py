"""Main FastAPI application for the Drug Name Matcher."""

import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from .api import health_router, search_router
from .config import get_settings
from .core.exceptions import CatalogUnavailableError, InvalidInputError
from .engine_instance import catalog_store
from .models.response import ErrorResponse

settings = get_settings()


def configure_logging(log_level: str = "INFO", log_format: str = "json") -> None:
    """Configure structlog on top of the standard library logger."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper(), logging.INFO),
    )

    renderer = (
        structlog.dev.ConsoleRenderer()
        if log_format.lower() == "console"
        else structlog.processors.JSONRenderer(ensure_ascii=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


configure_logging(settings.log_level, settings.log_format)
logger = structlog.get_logger()


def error_response(status_code: int, error: str, message: str, details: Optional[dict] = None) -> JSONResponse:
    """Build a JSON error response in the service's error shape."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, message=message, details=details).model_dump(mode="json")
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Drug Name Matcher service", version=settings.app_version)

    try:
        catalog_store.load_file(settings.catalog_path)
    except CatalogUnavailableError as e:
        # Keep serving: searches answer 503 until a catalog is available
        logger.error("Failed to load drug catalog", error=str(e), path=settings.catalog_path)

    yield

    # Shutdown
    logger.info("Shutting down Drug Name Matcher service")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Fuzzy matching of user-supplied drug names against a reference catalog",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# Add middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(GZipMiddleware, minimum_size=1000)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next) -> Response:
    """Log all HTTP requests."""
    start_time = time.time()

    logger.info(
        "Request started",
        method=request.method,
        url=str(request.url),
        client_ip=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent")
    )

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(
        "Request completed",
        method=request.method,
        url=str(request.url),
        status_code=response.status_code,
        process_time_ms=round(process_time * 1000, 2)
    )

    return response


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed requests as 400 in the service's error shape."""
    logger.warning("Request validation failed", url=str(request.url), errors=str(exc.errors()))
    return error_response(
        400,
        "Bad Request",
        "Request validation failed",
        {"errors": [
            {"loc": list(error.get("loc", ())), "msg": error.get("msg")}
            for error in exc.errors()
        ]}
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors in the service's error shape."""
    return error_response(exc.status_code, "HTTP Error", str(exc.detail))


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    """Reject invalid search input with the offending field and value."""
    logger.warning("Invalid search input", field=exc.field, reason=exc.reason)
    return error_response(400, "Invalid Input", str(exc), exc.to_details())


@app.exception_handler(CatalogUnavailableError)
async def catalog_unavailable_handler(request: Request, exc: CatalogUnavailableError) -> JSONResponse:
    """Report a missing or empty catalog."""
    logger.error("Drug catalog unavailable", error=str(exc))
    return error_response(503, "Catalog Unavailable", str(exc))


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle global exceptions."""
    logger.error(
        "Unhandled exception",
        method=request.method,
        url=str(request.url),
        error=str(exc),
        exc_info=True
    )

    return error_response(
        500,
        "Internal Server Error",
        "An unexpected error occurred",
        {"exception": str(exc)} if settings.debug else None
    )


# Include API routers
app.include_router(search_router)
app.include_router(health_router)


# Root endpoint
@app.get("/", summary="Root endpoint", description="Get basic information about the API")
async def root() -> dict:
    """Root endpoint with basic API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Fuzzy matching of user-supplied drug names against a reference catalog",
        "docs_url": "/docs",
        "health_url": "/health",
        "endpoints": {
            "search_drugs": "/api/search-drugs",
            "search_drug": "/api/search-drug/{drug_name}",
            "readiness": "/health/ready"
        },
        "algorithms": ["levenshtein", "initial", "combined"],
        "catalog_size": catalog_store.size,
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "drug_name_matcher.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=1 if settings.debug else settings.workers,
        log_level=settings.log_level.lower()
    )
