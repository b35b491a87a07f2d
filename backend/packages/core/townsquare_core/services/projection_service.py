"""
Content projection service.

Serves published posts and events localized to a reader's language: each
item is joined with its translation row for that language, falling back
to the original text when no translation exists yet.
"""

import math
import re
from dataclasses import dataclass
from datetime import date
from typing import Any

from sqlalchemy import ColumnElement, and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from townsquare_core.content_kinds import ContentKind, get_kind_info
from townsquare_core.schemas.content import EventView, Page, PostView
from townsquare_database.models import Event, EventTranslation, Post, PostTranslation

_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")


@dataclass(frozen=True)
class ContentFilters:
    """
    Optional list filters. Only event listings use them.

    Attributes:
        month: Calendar month as "YYYY-MM" matched against ``event_date``.
        category: Exact event category.
    """

    month: str | None = None
    category: str | None = None


def normalize_language(language_code: str) -> str:
    """Canonical form of a requested language code: "ES " becomes "es"."""
    return language_code.strip().lower()


def parse_month(month: str) -> tuple[date, date]:
    """
    Parse "YYYY-MM" into a half-open [first day, first day of next month) range.

    Raises:
        ValueError: If the value is not a valid year-month.
    """
    match = _MONTH_RE.match(month)
    if not match:
        raise ValueError(f"Invalid month {month!r}; expected YYYY-MM")
    year, month_number = int(match.group(1)), int(match.group(2))
    if not 1 <= month_number <= 12:
        raise ValueError(f"Invalid month {month!r}; expected YYYY-MM")
    start = date(year, month_number, 1)
    end = date(year + 1, 1, 1) if month_number == 12 else date(year, month_number + 1, 1)
    return start, end


def _localized_fields(
    original_title: str,
    original_body: str | None,
    original_language: str,
    original_direction: str,
    translation: PostTranslation | EventTranslation | None,
    language_code: str,
) -> dict[str, Any]:
    is_translated = translation is not None and language_code != original_language
    if translation is not None and is_translated:
        return {
            "title": translation.title,
            "body": translation.body if translation.body is not None else original_body,
            "text_direction": translation.text_direction,
            "is_translated": True,
        }
    return {
        "title": original_title,
        "body": original_body,
        "text_direction": original_direction,
        "is_translated": False,
    }


def project_post(post: Post, translation: PostTranslation | None, language_code: str) -> PostView:
    """Build the reader view of a post for ``language_code``."""
    localized = _localized_fields(
        post.title,
        post.content,
        post.original_language,
        post.text_direction,
        translation,
        language_code,
    )
    return PostView(
        id=post.id,
        author_name=post.author_name,
        title=localized["title"],
        content=localized["body"],
        original_title=post.title,
        original_content=post.content,
        link_url=post.link_url,
        image_url=post.image_url,
        post_type=post.post_type,
        original_language=post.original_language,
        original_text_direction=post.text_direction,
        text_direction=localized["text_direction"],
        is_translated=localized["is_translated"],
        created_at=post.created_at,
    )


def project_event(
    event: Event, translation: EventTranslation | None, language_code: str
) -> EventView:
    """Build the reader view of an event for ``language_code``."""
    localized = _localized_fields(
        event.title,
        event.description,
        event.original_language,
        event.text_direction,
        translation,
        language_code,
    )
    return EventView(
        id=event.id,
        organizer_name=event.organizer_name,
        title=localized["title"],
        description=localized["body"],
        original_title=event.title,
        original_description=event.description,
        event_date=event.event_date,
        event_time=event.event_time,
        location=event.location,
        category=event.category,
        is_free=event.is_free,
        ticket_price=float(event.ticket_price) if event.ticket_price is not None else None,
        ticket_url=event.ticket_url,
        original_language=event.original_language,
        original_text_direction=event.text_direction,
        text_direction=localized["text_direction"],
        is_translated=localized["is_translated"],
        created_at=event.created_at,
    )


class ProjectionService:
    """Read-side view of published content."""

    def __init__(self, session: AsyncSession):
        """
        Initialize projection service.

        Args:
            session: Database session.
        """
        self.session = session

    @staticmethod
    def _predicates(kind: ContentKind, filters: ContentFilters | None) -> list[ColumnElement[bool]]:
        info = get_kind_info(kind)
        predicates: list[ColumnElement[bool]] = [info.model.published.is_(True)]
        if kind is ContentKind.EVENT and filters is not None:
            if filters.month:
                start, end = parse_month(filters.month)
                predicates.append(Event.event_date >= start)
                predicates.append(Event.event_date < end)
            if filters.category:
                predicates.append(Event.category == filters.category)
        return predicates

    @staticmethod
    def _ordering(kind: ContentKind) -> list[Any]:
        if kind is ContentKind.EVENT:
            return [Event.event_date.asc(), Event.event_time.asc(), Event.id.asc()]
        return [Post.created_at.desc(), Post.id.desc()]

    @staticmethod
    def _project(kind: ContentKind, item: Any, translation: Any, language_code: str) -> Any:
        if kind is ContentKind.EVENT:
            return project_event(item, translation, language_code)
        return project_post(item, translation, language_code)

    def _joined_select(self, kind: ContentKind, language_code: str) -> Any:
        info = get_kind_info(kind)
        translation_model = info.translation_model
        return select(info.model, translation_model).outerjoin(
            translation_model,
            and_(
                getattr(translation_model, info.foreign_key) == info.model.id,
                translation_model.language_code == language_code,
            ),
        )

    async def list_published(
        self,
        kind: ContentKind,
        language_code: str,
        filters: ContentFilters | None = None,
        page: int = 1,
        limit: int = 20,
    ) -> Page[Any]:
        """
        List published items localized to ``language_code``.

        Args:
            kind: Content kind.
            language_code: Reader's language.
            filters: Optional event filters; absent filters are not applied.
            page: Page number (1-indexed).
            limit: Items per page.

        Returns:
            Page of PostView or EventView items with total and total_pages.

        Raises:
            ValueError: If page/limit are not positive or a filter is malformed.
        """
        if page < 1 or limit < 1:
            raise ValueError("page and limit must be positive")

        kind = ContentKind(kind)
        language_code = normalize_language(language_code)
        info = get_kind_info(kind)
        predicates = self._predicates(kind, filters)

        count_stmt = select(func.count()).select_from(info.model).where(*predicates)
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = (
            self._joined_select(kind, language_code)
            .where(*predicates)
            .order_by(*self._ordering(kind))
            .offset((page - 1) * limit)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        items = [
            self._project(kind, item, translation, language_code)
            for item, translation in result.all()
        ]

        return Page[Any](
            items=items,
            total=total,
            page=page,
            limit=limit,
            total_pages=math.ceil(total / limit),
        )

    async def get_published(self, kind: ContentKind, content_id: str, language_code: str) -> Any:
        """
        Get one published item localized to ``language_code``.

        Args:
            kind: Content kind.
            content_id: Content identifier.
            language_code: Reader's language.

        Returns:
            PostView or EventView.

        Raises:
            ValueError: If the item does not exist or is not published.
        """
        kind = ContentKind(kind)
        language_code = normalize_language(language_code)
        info = get_kind_info(kind)
        stmt = self._joined_select(kind, language_code).where(
            info.model.id == content_id, info.model.published.is_(True)
        )
        row = (await self.session.execute(stmt)).first()
        if row is None:
            raise ValueError(f"{kind.value.capitalize()} not found")
        item, translation = row
        return self._project(kind, item, translation, language_code)
