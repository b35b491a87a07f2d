"""Global pytest fixtures for testing."""

import contextlib
import secrets
from collections.abc import AsyncGenerator
from datetime import UTC, datetime, timedelta
from typing import Any

import dotenv
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from townsquare_database import Base
from townsquare_database.models import AdminSession, SupportedLanguage
from townsquare_database.session import get_session

with contextlib.suppress(OSError):
    dotenv.load_dotenv()

TEST_DATABASE_URL = "sqlite+aiosqlite://"

TEST_LANGUAGES = [
    ("en", "English", "English", False),
    ("es", "Spanish", "Español", False),
    ("ar", "Arabic", "العربية", True),
]


class MockArqRedis:
    """Mock ArqRedis for testing."""

    def __init__(self):
        self.enqueued_jobs: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = []
        self.fail_with: Exception | None = None

    async def enqueue_job(self, func_name: str, *args: Any, **kwargs: Any) -> None:
        """Mock enqueue_job that records calls without actually queuing."""
        if self.fail_with is not None:
            raise self.fail_with
        self.enqueued_jobs.append((func_name, args, kwargs))

    def reset(self) -> None:
        """Reset recorded jobs and failure injection."""
        self.enqueued_jobs.clear()
        self.fail_with = None


# Global mock redis instance for testing
mock_redis = MockArqRedis()


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create an in-memory database with all tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,  # One shared connection keeps the in-memory database alive
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a fresh database session for each test."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with async_session() as session:
        yield session


@pytest_asyncio.fixture
async def languages(db_session: AsyncSession) -> list[SupportedLanguage]:
    """Seed English, Spanish and Arabic as enabled languages."""
    rows = [
        SupportedLanguage(code=code, name=name, native_name=native, is_rtl=is_rtl, enabled=True)
        for code, name, native, is_rtl in TEST_LANGUAGES
    ]
    db_session.add_all(rows)
    await db_session.commit()
    return rows


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client with database and redis overrides."""
    from townsquare_api.dependencies import get_redis_pool
    from townsquare_api.main import create_app

    app = create_app()

    async def override_get_session():
        yield db_session

    async def override_get_redis_pool():
        return mock_redis

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_redis_pool] = override_get_redis_pool

    # Reset mock redis state before each test
    mock_redis.reset()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def test_mock_redis() -> MockArqRedis:
    """Provide access to the mock redis instance for testing."""
    return mock_redis


@pytest_asyncio.fixture
async def admin_headers(db_session: AsyncSession) -> dict[str, str]:
    """Generate auth headers backed by a stored admin session."""
    token = secrets.token_urlsafe(32)
    db_session.add(
        AdminSession(session_token=token, expires_at=datetime.now(UTC) + timedelta(hours=1))
    )
    await db_session.commit()
    return {"Authorization": f"Bearer {token}"}
