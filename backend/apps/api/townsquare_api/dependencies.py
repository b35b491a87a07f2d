"""
FastAPI dependencies.

Provides dependency injection for database sessions, the task queue,
admin authentication, and services.
"""

from typing import Annotated

from arq.connections import ArqRedis
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from townsquare_core.services import (
    AdminAuthService,
    ContentService,
    LanguageService,
    ProjectionService,
    PublishService,
    TranslationGateway,
)
from townsquare_database.session import get_session

from .config import settings

# Security scheme for admin bearer tokens
security = HTTPBearer(auto_error=False)


async def get_redis_pool(request: Request) -> ArqRedis | None:
    """
    Get the arq Redis pool created at startup.

    Returns:
        ArqRedis pool, or None when Redis was unavailable at startup.
    """
    return getattr(request.app.state, "redis_pool", None)


async def get_translation_gateway(request: Request) -> TranslationGateway | None:
    """Get the translation gateway used for language detection, if configured."""
    return getattr(request.app.state, "translation_gateway", None)


# Service dependencies
def get_content_service(
    session: Annotated[AsyncSession, Depends(get_session)],
    gateway: Annotated[TranslationGateway | None, Depends(get_translation_gateway)],
) -> ContentService:
    """Get content service instance."""
    return ContentService(session, detector=gateway, default_language=settings.default_language)


def get_projection_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ProjectionService:
    """Get projection service instance."""
    return ProjectionService(session)


def get_publish_service(
    session: Annotated[AsyncSession, Depends(get_session)],
    redis_pool: Annotated[ArqRedis | None, Depends(get_redis_pool)],
) -> PublishService:
    """Get publish service instance."""
    return PublishService(session, redis_pool)


def get_language_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> LanguageService:
    """Get language service instance."""
    return LanguageService(session)


def get_admin_auth_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> AdminAuthService:
    """Get admin authentication service instance."""
    return AdminAuthService(
        session,
        admin_password=settings.admin_password,
        session_hours=settings.admin_session_hours,
    )


async def get_current_admin(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    auth_service: Annotated[AdminAuthService, Depends(get_admin_auth_service)],
) -> str:
    """
    Require a valid admin bearer token.

    Args:
        credentials: HTTP bearer credentials.
        auth_service: Admin authentication service.

    Returns:
        The verified token.

    Raises:
        HTTPException: If the token is missing, unknown, or expired.
    """
    if credentials is None or not await auth_service.verify(credentials.credentials):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired admin token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return credentials.credentials
