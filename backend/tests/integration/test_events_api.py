"""Integration tests for public event endpoints."""

from datetime import date, time

import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from townsquare_database.models import Event


@pytest_asyncio.fixture
async def published_events(db_session: AsyncSession, languages) -> list[Event]:
    """Create published events across two months and categories."""
    events = [
        Event(
            organizer_name="Choir",
            title="Spring concert",
            event_date=date(2024, 5, 20),
            event_time=time(19, 30),
            category="music",
            original_language="en",
            text_direction="ltr",
            published=True,
        ),
        Event(
            organizer_name="Market",
            title="Farmers market",
            event_date=date(2024, 5, 4),
            category="food",
            original_language="en",
            text_direction="ltr",
            published=True,
        ),
        Event(
            organizer_name="Choir",
            title="Summer concert",
            event_date=date(2024, 6, 21),
            category="music",
            original_language="en",
            text_direction="ltr",
            published=True,
        ),
    ]
    db_session.add_all(events)
    await db_session.commit()
    return events


class TestListEvents:
    """Test GET /api/events."""

    @pytest.mark.asyncio
    async def test_ordered_by_date(self, client: AsyncClient, published_events):
        response = await client.get("/api/events")

        assert response.status_code == 200
        titles = [e["title"] for e in response.json()["items"]]
        assert titles == ["Farmers market", "Spring concert", "Summer concert"]

    @pytest.mark.asyncio
    async def test_month_and_category_filters(self, client: AsyncClient, published_events):
        response = await client.get(
            "/api/events", params={"month": "2024-05", "category": "music"}
        )

        data = response.json()
        assert data["total"] == 1
        assert data["items"][0]["title"] == "Spring concert"

    @pytest.mark.asyncio
    async def test_malformed_month(self, client: AsyncClient, published_events):
        response = await client.get("/api/events", params={"month": "05-2024"})

        assert response.status_code == 400


class TestSubmitEvent:
    """Test POST /api/events."""

    @pytest.mark.asyncio
    async def test_submit_event(self, client: AsyncClient, languages):
        response = await client.post(
            "/api/events",
            json={
                "organizer_name": "Library",
                "title": "Book swap",
                "event_date": "2024-07-01",
                "event_time": "10:00:00",
                "is_free": True,
                "language": "en",
            },
        )

        assert response.status_code == 201
        item = response.json()["item"]
        assert item["published"] is False
        assert item["event_date"] == "2024-07-01"

    @pytest.mark.asyncio
    async def test_unpublished_event_hidden(self, client: AsyncClient, languages):
        created = await client.post(
            "/api/events",
            json={"organizer_name": "Library", "title": "Hidden", "event_date": "2024-07-01"},
        )

        response = await client.get(f"/api/events/{created.json()['item']['id']}")

        assert response.status_code == 404
