"""
Events router.

Public endpoints for browsing published events and submitting new ones.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from townsquare_core.content_kinds import ContentKind
from townsquare_core.schemas import (
    EventCreate,
    EventResponse,
    EventView,
    Page,
    SubmissionResponse,
)
from townsquare_core.services import ContentFilters, ContentService, ProjectionService

from ..config import settings
from ..dependencies import get_content_service, get_projection_service

router = APIRouter()


@router.get("")
async def list_events(
    projection_service: Annotated[ProjectionService, Depends(get_projection_service)],
    lang: str | None = None,
    month: str | None = None,
    category: str | None = None,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
) -> Page[EventView]:
    """
    List published events in the reader's language, soonest first.

    Args:
        projection_service: Projection service.
        lang: Reader's language code. Defaults to the configured language.
        month: Optional "YYYY-MM" filter on the event date.
        category: Optional category filter.
        page: Page number (1-indexed).
        limit: Items per page (max 100).

    Returns:
        Paginated list of localized events.

    Raises:
        HTTPException: If ``month`` is malformed.
    """
    try:
        return await projection_service.list_published(
            ContentKind.EVENT,
            lang or settings.default_language,
            filters=ContentFilters(month=month, category=category),
            page=page,
            limit=limit,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from None


@router.get("/{event_id}")
async def get_event(
    event_id: str,
    projection_service: Annotated[ProjectionService, Depends(get_projection_service)],
    lang: str | None = None,
) -> EventView:
    """
    Get a published event in the reader's language.

    Raises:
        HTTPException: If the event does not exist or is not published.
    """
    try:
        return await projection_service.get_published(
            ContentKind.EVENT, event_id, lang or settings.default_language
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None


@router.post("", status_code=status.HTTP_201_CREATED)
async def submit_event(
    data: EventCreate,
    content_service: Annotated[ContentService, Depends(get_content_service)],
) -> SubmissionResponse[EventResponse]:
    """
    Submit an event for moderation.

    Raises:
        HTTPException: If the event's language is not supported.
    """
    try:
        event = await content_service.create_event(data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from None
    return SubmissionResponse[EventResponse](
        item=event, message="Event submitted and awaiting moderation"
    )
