"""Tests for the content projection service."""

from datetime import date, time

import pytest

from townsquare_core.content_kinds import ContentKind
from townsquare_core.services.projection_service import (
    ContentFilters,
    ProjectionService,
    parse_month,
)
from townsquare_database.models import Event, EventTranslation, Post, PostTranslation


async def _create_post(session, title="Hello", published=True, language="en") -> Post:
    post = Post(
        author_name="Alice",
        title=title,
        content="World",
        original_language=language,
        text_direction="ltr",
        published=published,
    )
    session.add(post)
    await session.commit()
    return post


async def _create_event(
    session, title, event_date, event_time=None, category=None, published=True
) -> Event:
    event = Event(
        organizer_name="Library",
        title=title,
        description=f"{title} description",
        event_date=event_date,
        event_time=event_time,
        category=category,
        original_language="en",
        text_direction="ltr",
        published=published,
    )
    session.add(event)
    await session.commit()
    return event


class TestPostProjection:
    """Test projected reads of posts."""

    @pytest.mark.asyncio
    async def test_falls_back_to_original_without_translation(self, db_session, languages):
        post = await _create_post(db_session)
        service = ProjectionService(db_session)

        view = await service.get_published(ContentKind.POST, post.id, "es")

        assert view.title == "Hello"
        assert view.content == "World"
        assert view.is_translated is False
        assert view.text_direction == "ltr"
        assert view.original_language == "en"

    @pytest.mark.asyncio
    async def test_uses_translation_when_present(self, db_session, languages):
        post = await _create_post(db_session)
        db_session.add(
            PostTranslation(
                post_id=post.id,
                language_code="ar",
                title="مرحبا",
                content="عالم",
                text_direction="rtl",
            )
        )
        await db_session.commit()
        service = ProjectionService(db_session)

        view = await service.get_published(ContentKind.POST, post.id, "ar")

        assert view.title == "مرحبا"
        assert view.content == "عالم"
        assert view.text_direction == "rtl"
        assert view.is_translated is True
        assert view.original_title == "Hello"
        assert view.original_content == "World"
        assert view.original_text_direction == "ltr"

    @pytest.mark.asyncio
    async def test_null_translated_body_falls_back(self, db_session, languages):
        post = await _create_post(db_session)
        db_session.add(
            PostTranslation(
                post_id=post.id,
                language_code="es",
                title="Hola",
                content=None,
                text_direction="ltr",
            )
        )
        await db_session.commit()
        service = ProjectionService(db_session)

        view = await service.get_published(ContentKind.POST, post.id, "es")

        assert view.title == "Hola"
        assert view.content == "World"
        assert view.is_translated is True

    @pytest.mark.asyncio
    async def test_original_language_never_translated(self, db_session, languages):
        """A stray row in the original language is ignored."""
        post = await _create_post(db_session)
        db_session.add(
            PostTranslation(
                post_id=post.id,
                language_code="en",
                title="Hello again",
                content="World again",
                text_direction="ltr",
            )
        )
        await db_session.commit()
        service = ProjectionService(db_session)

        view = await service.get_published(ContentKind.POST, post.id, "en")

        assert view.is_translated is False
        assert view.title == "Hello"

    @pytest.mark.asyncio
    async def test_unpublished_post_not_visible(self, db_session, languages):
        post = await _create_post(db_session, published=False)
        service = ProjectionService(db_session)

        with pytest.raises(ValueError, match="not found"):
            await service.get_published(ContentKind.POST, post.id, "en")

        page = await service.list_published(ContentKind.POST, "en")
        assert page.total == 0
        assert page.items == []

    @pytest.mark.asyncio
    async def test_pagination(self, db_session, languages):
        """45 posts with limit 20 split into pages of 20, 20 and 5."""
        for i in range(45):
            db_session.add(
                Post(
                    author_name="Alice",
                    title=f"Post {i}",
                    original_language="en",
                    text_direction="ltr",
                    published=True,
                )
            )
        await db_session.commit()
        service = ProjectionService(db_session)

        pages = [
            await service.list_published(ContentKind.POST, "es", page=n, limit=20)
            for n in (1, 2, 3)
        ]

        assert [len(p.items) for p in pages] == [20, 20, 5]
        assert all(p.total == 45 for p in pages)
        assert all(p.total_pages == 3 for p in pages)
        ids = [item.id for p in pages for item in p.items]
        assert len(set(ids)) == 45

    @pytest.mark.asyncio
    async def test_invalid_page_rejected(self, db_session, languages):
        service = ProjectionService(db_session)

        with pytest.raises(ValueError):
            await service.list_published(ContentKind.POST, "en", page=0)


class TestEventProjection:
    """Test projected reads of events."""

    @pytest.mark.asyncio
    async def test_ordered_by_date_then_time(self, db_session, languages):
        await _create_event(db_session, "Late", date(2024, 5, 10), time(18, 0))
        await _create_event(db_session, "Early", date(2024, 5, 10), time(9, 0))
        await _create_event(db_session, "First", date(2024, 5, 1))
        service = ProjectionService(db_session)

        page = await service.list_published(ContentKind.EVENT, "en")

        assert [e.title for e in page.items] == ["First", "Early", "Late"]

    @pytest.mark.asyncio
    async def test_month_filter(self, db_session, languages):
        await _create_event(db_session, "April", date(2024, 4, 30))
        await _create_event(db_session, "May", date(2024, 5, 15))
        await _create_event(db_session, "June", date(2024, 6, 1))
        service = ProjectionService(db_session)

        page = await service.list_published(
            ContentKind.EVENT, "en", filters=ContentFilters(month="2024-05")
        )

        assert [e.title for e in page.items] == ["May"]
        assert page.total == 1

    @pytest.mark.asyncio
    async def test_category_filter(self, db_session, languages):
        await _create_event(db_session, "Concert", date(2024, 5, 1), category="music")
        await _create_event(db_session, "Market", date(2024, 5, 2), category="food")
        service = ProjectionService(db_session)

        page = await service.list_published(
            ContentKind.EVENT, "en", filters=ContentFilters(category="music")
        )

        assert [e.title for e in page.items] == ["Concert"]

    @pytest.mark.asyncio
    async def test_malformed_month_rejected(self, db_session, languages):
        service = ProjectionService(db_session)

        with pytest.raises(ValueError, match="Invalid month"):
            await service.list_published(
                ContentKind.EVENT, "en", filters=ContentFilters(month="May 2024")
            )

    @pytest.mark.asyncio
    async def test_translated_event(self, db_session, languages):
        event = await _create_event(db_session, "Fair", date(2024, 5, 1))
        db_session.add(
            EventTranslation(
                event_id=event.id,
                language_code="es",
                title="Feria",
                description="Descripción",
                text_direction="ltr",
            )
        )
        await db_session.commit()
        service = ProjectionService(db_session)

        view = await service.get_published(ContentKind.EVENT, event.id, "es")

        assert view.title == "Feria"
        assert view.description == "Descripción"
        assert view.original_description == "Fair description"
        assert view.is_translated is True


class TestParseMonth:
    """Test parse_month helper."""

    def test_regular_month(self):
        assert parse_month("2024-02") == (date(2024, 2, 1), date(2024, 3, 1))

    def test_december_rolls_over(self):
        assert parse_month("2024-12") == (date(2024, 12, 1), date(2025, 1, 1))

    @pytest.mark.parametrize("value", ["2024-13", "2024-00", "24-05", "2024/05", ""])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_month(value)
