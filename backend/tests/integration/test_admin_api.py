"""Integration tests for admin endpoints."""

from unittest.mock import patch

import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from townsquare_database.models import Post


@pytest_asyncio.fixture
async def pending_post(db_session: AsyncSession, languages) -> Post:
    """Create an unpublished post."""
    post = Post(
        author_name="Alice",
        title="Lost cat",
        content="Grey, answers to Miso.",
        original_language="en",
        text_direction="ltr",
        published=False,
    )
    db_session.add(post)
    await db_session.commit()
    return post


class TestAdminAuth:
    """Test admin login, logout and token checks."""

    @pytest.mark.asyncio
    async def test_login_and_use_token(self, client: AsyncClient, languages):
        with patch("townsquare_api.dependencies.settings.admin_password", "s3cret"):
            response = await client.post("/api/admin/login", json={"password": "s3cret"})

        assert response.status_code == 200
        token = response.json()["token"]

        listing = await client.get(
            "/api/admin/posts", headers={"Authorization": f"Bearer {token}"}
        )
        assert listing.status_code == 200

    @pytest.mark.asyncio
    async def test_wrong_password(self, client: AsyncClient):
        with patch("townsquare_api.dependencies.settings.admin_password", "s3cret"):
            response = await client.post("/api/admin/login", json={"password": "nope"})

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_missing_token(self, client: AsyncClient):
        response = await client.get("/api/admin/posts")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    @pytest.mark.asyncio
    async def test_logout_revokes(self, client: AsyncClient, admin_headers):
        response = await client.post("/api/admin/logout", headers=admin_headers)
        assert response.status_code == 200

        again = await client.get("/api/admin/posts", headers=admin_headers)
        assert again.status_code == 401


class TestModeration:
    """Test publish, unpublish and delete."""

    @pytest.mark.asyncio
    async def test_list_includes_unpublished(
        self, client: AsyncClient, admin_headers, pending_post
    ):
        response = await client.get("/api/admin/posts", headers=admin_headers)

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [pending_post.id]

    @pytest.mark.asyncio
    async def test_publish_enqueues_fan_out(
        self, client: AsyncClient, admin_headers, pending_post, test_mock_redis
    ):
        response = await client.post(
            f"/api/admin/posts/{pending_post.id}/publish", headers=admin_headers
        )

        assert response.status_code == 200
        assert response.json()["published"] is True
        assert test_mock_redis.enqueued_jobs == [
            ("fan_out_translations_task", (), {"kind": "post", "content_id": pending_post.id})
        ]

        public = await client.get(f"/api/posts/{pending_post.id}")
        assert public.status_code == 200

    @pytest.mark.asyncio
    async def test_publish_survives_queue_failure(
        self, client: AsyncClient, admin_headers, pending_post, test_mock_redis
    ):
        test_mock_redis.fail_with = ConnectionError("redis down")

        response = await client.post(
            f"/api/admin/posts/{pending_post.id}/publish", headers=admin_headers
        )

        assert response.status_code == 200
        assert response.json()["published"] is True

    @pytest.mark.asyncio
    async def test_publish_unknown_item(self, client: AsyncClient, admin_headers, languages):
        response = await client.post("/api/admin/events/missing/publish", headers=admin_headers)

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_unknown_collection(self, client: AsyncClient, admin_headers, pending_post):
        response = await client.post(
            f"/api/admin/videos/{pending_post.id}/publish", headers=admin_headers
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_unpublish(self, client: AsyncClient, admin_headers, pending_post):
        await client.post(f"/api/admin/posts/{pending_post.id}/publish", headers=admin_headers)

        response = await client.post(
            f"/api/admin/posts/{pending_post.id}/unpublish", headers=admin_headers
        )

        assert response.json()["published"] is False
        public = await client.get(f"/api/posts/{pending_post.id}")
        assert public.status_code == 404

    @pytest.mark.asyncio
    async def test_delete(self, client: AsyncClient, admin_headers, pending_post):
        response = await client.delete(f"/api/admin/posts/{pending_post.id}", headers=admin_headers)

        assert response.status_code == 204
        listing = await client.get("/api/admin/posts", headers=admin_headers)
        assert listing.json() == []


class TestLanguageAdmin:
    """Test admin language management."""

    @pytest.mark.asyncio
    async def test_disable_language(self, client: AsyncClient, admin_headers, languages):
        response = await client.patch(
            "/api/admin/languages/es", json={"enabled": False}, headers=admin_headers
        )

        assert response.status_code == 200
        assert response.json()["enabled"] is False

        public = await client.get("/api/languages")
        assert "es" not in [lang["code"] for lang in public.json()["languages"]]

        everything = await client.get("/api/admin/languages", headers=admin_headers)
        assert "es" in [lang["code"] for lang in everything.json()["languages"]]

    @pytest.mark.asyncio
    async def test_unknown_language(self, client: AsyncClient, admin_headers, languages):
        response = await client.patch(
            "/api/admin/languages/xx", json={"enabled": True}, headers=admin_headers
        )

        assert response.status_code == 404
