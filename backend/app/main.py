# ============================================================================
# Zaryab Content API - FastAPI Application Entry Point
# ============================================================================
"""
Main FastAPI application module for the Zaryab content API.

This module sets up the FastAPI application with:
- Logging configuration
- CORS and correlation ID middleware
- Database lifecycle (table creation on startup, engine disposal on shutdown)
- Error handlers rendering every failure as {"code", "message", "data"}
- API router integration under the configured prefix

Usage:
    Direct: python -m app.main
    Docker: uvicorn app.main:app --host 0.0.0.0 --port 8000 --reload
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1 import api_router
from .config import settings
from .core.errors import ApiError, error_body
from .core.middleware import CorrelationIdFilter, CorrelationMiddleware
from .services.database_service import database_service

# ============================================================================
# LOGGING
# ============================================================================

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] %(message)s",
)
for _handler in logging.getLogger().handlers:
    _handler.addFilter(CorrelationIdFilter())
logger = logging.getLogger("zaryab.main")


# ============================================================================
# APPLICATION LIFECYCLE
# ============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup and dispose of the engine on shutdown."""
    logger.info(f"Starting {settings.api_title} v{settings.api_version}")
    await database_service.init_db()
    logger.info("Startup complete")

    yield

    logger.info("Shutting down...")
    await database_service.close()
    logger.info("Shutdown complete")


app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    description=(
        "Read-only content API for the Zaryab literary site: stories and episodes, "
        "poems, letters, podcasts, books, articles, reviews and authors, plus "
        "global search and newsletter subscription."
    ),
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# ============================================================================
# MIDDLEWARE CONFIGURATION
# ============================================================================

app.add_middleware(CorrelationMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=[CorrelationMiddleware.CORRELATION_HEADER],
)


# ============================================================================
# ERROR HANDLERS
# ============================================================================

@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unknown routes, wrong methods and other plain HTTP errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(f"http_{exc.status_code}", str(exc.detail), exc.status_code),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
@app.exception_handler(ValidationError)
async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Malformed or missing request parameters."""
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}" for error in errors
    ) or "Invalid parameter(s)"
    return JSONResponse(status_code=422, content=error_body("rest_invalid_param", message, 422))


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    message = str(exc) if settings.debug else "An unexpected error occurred"
    return JSONResponse(status_code=500, content=error_body("internal_error", message, 500))


# ============================================================================
# ROUTER CONFIGURATION
# ============================================================================

app.include_router(api_router, prefix=settings.api_prefix)


@app.get("/", tags=["root"])
async def root() -> Dict[str, Any]:
    """API metadata and links."""
    return {
        "name": settings.api_title,
        "version": settings.api_version,
        "status": "running",
        "docs_url": "/docs",
        "health_check": f"{settings.api_prefix}/health",
        "timestamp": datetime.now(),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
