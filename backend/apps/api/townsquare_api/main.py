"""
Townsquare API - FastAPI application entry point.

This module initializes the FastAPI application and configures
middleware, routers, and lifecycle events.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
from arq import create_pool
from arq.connections import RedisSettings
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from townsquare_core import get_logger, init_logging
from townsquare_core.config import translation_config
from townsquare_core.services import create_translation_gateway
from townsquare_database.session import close_database, init_database

from .config import settings
from .routers import admin, events, languages, posts

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifecycle manager.

    Opens the database engine, the task queue pool and the HTTP client used
    for language detection, and closes them on shutdown. A missing Redis
    only disables translation scheduling.

    Args:
        app: The FastAPI application instance.

    Yields:
        None during application runtime.
    """
    init_logging()
    logger.info("Starting Townsquare API", extra={"version": settings.version})
    init_database(settings.database_url)

    try:
        app.state.redis_pool = await create_pool(RedisSettings.from_dsn(settings.redis_url))
        logger.info("Redis pool initialized")
    except Exception:
        logger.exception("Redis unavailable; translations will not be scheduled")
        app.state.redis_pool = None

    http_client = httpx.AsyncClient()
    app.state.translation_gateway = create_translation_gateway(translation_config, http_client)

    yield

    await http_client.aclose()
    if app.state.redis_pool is not None:
        await app.state.redis_pool.close()
        logger.info("Redis pool closed")
    await close_database()
    logger.info("Shutting down Townsquare API")


def create_app() -> FastAPI:
    """Build a configured FastAPI application."""
    application = FastAPI(
        title="Townsquare API",
        description="Multilingual community board with automatic translation",
        version=settings.version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register API routers
    application.include_router(posts.router, prefix="/api/posts", tags=["Posts"])
    application.include_router(events.router, prefix="/api/events", tags=["Events"])
    application.include_router(languages.router, prefix="/api/languages", tags=["Languages"])
    application.include_router(admin.router, prefix="/api/admin", tags=["Admin"])

    @application.get("/api/health")
    async def health_check() -> dict[str, str]:
        """
        Health check endpoint.

        Returns:
            Dictionary containing service status and version.
        """
        return {"status": "healthy", "version": settings.version}

    return application


app = create_app()
