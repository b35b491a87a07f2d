"""
Admin router.

Provides endpoints for moderation and language management. Everything
except login requires an admin bearer token.
"""

from typing import Annotated, Literal

from fastapi import APIRouter, Depends, HTTPException, status

from townsquare_core.content_kinds import ContentKind
from townsquare_core.schemas import (
    AdminLoginRequest,
    AdminLoginResponse,
    EventResponse,
    LanguageListResponse,
    LanguageResponse,
    LanguageUpdate,
    PostResponse,
    PublishResponse,
)
from townsquare_core.services import (
    AdminAuthService,
    ContentService,
    LanguageService,
    PublishService,
)

from ..dependencies import (
    get_admin_auth_service,
    get_content_service,
    get_current_admin,
    get_language_service,
    get_publish_service,
)

router = APIRouter()

Collection = Literal["posts", "events"]

_COLLECTION_KINDS: dict[str, ContentKind] = {
    "posts": ContentKind.POST,
    "events": ContentKind.EVENT,
}


@router.post("/login")
async def admin_login(
    request: AdminLoginRequest,
    auth_service: Annotated[AdminAuthService, Depends(get_admin_auth_service)],
) -> AdminLoginResponse:
    """
    Exchange the admin password for a bearer token.

    Raises:
        HTTPException: If the password is wrong or admin login is disabled.
    """
    try:
        return await auth_service.login(request.password)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e)) from None


@router.post("/logout")
async def admin_logout(
    token: Annotated[str, Depends(get_current_admin)],
    auth_service: Annotated[AdminAuthService, Depends(get_admin_auth_service)],
) -> dict[str, str]:
    """Revoke the current admin token."""
    await auth_service.logout(token)
    return {"message": "Logged out"}


@router.get("/languages")
async def list_all_languages(
    _: Annotated[str, Depends(get_current_admin)],
    language_service: Annotated[LanguageService, Depends(get_language_service)],
) -> LanguageListResponse:
    """List every supported language, enabled or not."""
    return LanguageListResponse(languages=await language_service.list_all())


@router.patch("/languages/{code}")
async def update_language(
    code: str,
    data: LanguageUpdate,
    _: Annotated[str, Depends(get_current_admin)],
    language_service: Annotated[LanguageService, Depends(get_language_service)],
) -> LanguageResponse:
    """
    Enable or disable a language for future translations.

    Raises:
        HTTPException: If the language does not exist.
    """
    try:
        return await language_service.set_enabled(code, data.enabled)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None


@router.get("/{collection}")
async def list_content(
    collection: Collection,
    _: Annotated[str, Depends(get_current_admin)],
    content_service: Annotated[ContentService, Depends(get_content_service)],
) -> list[PostResponse] | list[EventResponse]:
    """
    List all posts or events, including unpublished submissions.

    Args:
        collection: "posts" or "events".

    Returns:
        Stored items, newest first.
    """
    return await content_service.list_all(_COLLECTION_KINDS[collection])


@router.post("/{collection}/{content_id}/publish")
async def publish_content(
    collection: Collection,
    content_id: str,
    _: Annotated[str, Depends(get_current_admin)],
    publish_service: Annotated[PublishService, Depends(get_publish_service)],
) -> PublishResponse:
    """
    Publish an item and start translating it in the background.

    The response returns before any translation is done.

    Raises:
        HTTPException: If the item does not exist.
    """
    try:
        return await publish_service.publish(_COLLECTION_KINDS[collection], content_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None


@router.post("/{collection}/{content_id}/unpublish")
async def unpublish_content(
    collection: Collection,
    content_id: str,
    _: Annotated[str, Depends(get_current_admin)],
    publish_service: Annotated[PublishService, Depends(get_publish_service)],
) -> PublishResponse:
    """
    Hide an item from readers.

    Raises:
        HTTPException: If the item does not exist.
    """
    try:
        return await publish_service.unpublish(_COLLECTION_KINDS[collection], content_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None


@router.delete("/{collection}/{content_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_content(
    collection: Collection,
    content_id: str,
    _: Annotated[str, Depends(get_current_admin)],
    content_service: Annotated[ContentService, Depends(get_content_service)],
) -> None:
    """
    Delete an item and its translations.

    Raises:
        HTTPException: If the item does not exist.
    """
    try:
        await content_service.delete(_COLLECTION_KINDS[collection], content_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None
