"""
Posts router.

Public endpoints for reading published posts and submitting new ones.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from townsquare_core.content_kinds import ContentKind
from townsquare_core.schemas import Page, PostCreate, PostResponse, PostView, SubmissionResponse
from townsquare_core.services import ContentService, ProjectionService

from ..config import settings
from ..dependencies import get_content_service, get_projection_service

router = APIRouter()


@router.get("")
async def list_posts(
    projection_service: Annotated[ProjectionService, Depends(get_projection_service)],
    lang: str | None = None,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
) -> Page[PostView]:
    """
    List published posts in the reader's language.

    Args:
        projection_service: Projection service.
        lang: Reader's language code. Defaults to the configured language.
        page: Page number (1-indexed).
        limit: Items per page (max 100).

    Returns:
        Paginated list of localized posts.
    """
    try:
        return await projection_service.list_published(
            ContentKind.POST,
            lang or settings.default_language,
            page=page,
            limit=limit,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from None


@router.get("/{post_id}")
async def get_post(
    post_id: str,
    projection_service: Annotated[ProjectionService, Depends(get_projection_service)],
    lang: str | None = None,
) -> PostView:
    """
    Get a published post in the reader's language.

    Raises:
        HTTPException: If the post does not exist or is not published.
    """
    try:
        return await projection_service.get_published(
            ContentKind.POST, post_id, lang or settings.default_language
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None


@router.post("", status_code=status.HTTP_201_CREATED)
async def submit_post(
    data: PostCreate,
    content_service: Annotated[ContentService, Depends(get_content_service)],
) -> SubmissionResponse[PostResponse]:
    """
    Submit a post for moderation.

    Args:
        data: Post submission.
        content_service: Content service.

    Returns:
        The stored, unpublished post.

    Raises:
        HTTPException: If the post's language is not supported.
    """
    try:
        post = await content_service.create_post(data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from None
    return SubmissionResponse[PostResponse](
        item=post, message="Post submitted and awaiting moderation"
    )
