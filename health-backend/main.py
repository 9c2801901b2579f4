from __future__ import annotations

"""Trackr Backend - Main Application Entry Point
FastAPI application factory for the health tracking backend.
Architecture Overview:
    - Feature-based modular architecture (see features/ directory)
    - Event repositories over a local SQLite database (features/tracking)
    - Derived weekly stats, streaks and trends (features/insights)
    - AI coaching artifacts behind an in-memory TTL store (features/coaching)
    - Food photo and handwriting understanding (features/vision)
Entry Points:
    - /health - Health check endpoint
    - /api/v1/* - RESTful API endpoints for each feature
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator

from core.utils.env import is_production
# Track startup time in non-production environments
start_time = time.time() if not is_production() else None

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.exceptions import (
    ConfigurationError,
    MalformedResponseError,
    ProviderError,
    ProviderTimeoutError,
    RepositoryError,
    ValidationError,
)
from core.logging import setup_logging
from core.observability import register_http_request_logging
from core.pydantic_schemas import error_from_exception
from features.coaching.routes import router as coaching_router
from features.insights.routes import router as insights_router
from features.vision.routes import router as vision_router
from infrastructure.db import dispose_engine, get_trackr_engine, prepare_database

APP_VERSION = "1.0.0"

setup_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events."""
    # Startup
    await prepare_database(get_trackr_engine())
    yield
    # Shutdown
    logger.info("Application shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete")


def _register_exception_handlers(app: FastAPI) -> None:
    """Map service exceptions onto the standard error envelope."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        payload = error_from_exception(
            status.HTTP_422_UNPROCESSABLE_ENTITY, exc, field=exc.field, errors=exc.errors
        )
        return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=payload)

    @app.exception_handler(RepositoryError)
    async def repository_error_handler(request: Request, exc: RepositoryError):
        logger.error("Repository failure during %s: %s", exc.operation, exc.message)
        payload = error_from_exception(
            status.HTTP_500_INTERNAL_SERVER_ERROR, exc, operation=exc.operation
        )
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=payload)

    @app.exception_handler(ProviderTimeoutError)
    async def provider_timeout_handler(request: Request, exc: ProviderTimeoutError):
        payload = error_from_exception(
            status.HTTP_504_GATEWAY_TIMEOUT, exc, provider=exc.provider, timeout=exc.timeout
        )
        return JSONResponse(status_code=status.HTTP_504_GATEWAY_TIMEOUT, content=payload)

    # MalformedResponseError is a ProviderError; both surface as a bad gateway
    @app.exception_handler(ProviderError)
    async def provider_error_handler(request: Request, exc: ProviderError):
        if not isinstance(exc, MalformedResponseError):
            logger.error("Provider failure: %s", exc.message)
        payload = error_from_exception(status.HTTP_502_BAD_GATEWAY, exc, provider=exc.provider)
        return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content=payload)

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(request: Request, exc: ConfigurationError):
        """Return a structured API envelope for configuration errors."""

        payload = error_from_exception(status.HTTP_500_INTERNAL_SERVER_ERROR, exc, key=exc.key)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=payload)


def create_app() -> FastAPI:
    """Application factory returning a configured FastAPI instance."""

    app = FastAPI(
        title="Trackr Backend",
        description="Health tracking insights, AI coaching and image understanding",
        version=APP_VERSION,
        lifespan=lifespan,
    )

    if is_production():
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    else:
        # Development: allow any localhost port (Expo web, Vite, ...)
        app.add_middleware(
            CORSMiddleware,
            allow_origin_regex=r"^http://(localhost|127\.0\.0\.1)(:\d+)?$",
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    _register_exception_handlers(app)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy", "version": APP_VERSION}

    register_http_request_logging(app)

    app.include_router(insights_router)
    app.include_router(coaching_router)
    app.include_router(vision_router)

    timing_info = ""
    if start_time is not None:
        elapsed = time.time() - start_time
        timing_info = f" (loaded in {elapsed:.2f}s)"

    logger.info("Application created with insights, coaching and vision routers%s", timing_info)
    return app


app = create_app()


if __name__ == "__main__":  # pragma: no cover - manual execution helper
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
