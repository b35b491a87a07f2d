"""
Admin authentication service.

A single shared administrator password is exchanged for an opaque bearer
token stored in ``admin_sessions``.
"""

import secrets
from datetime import UTC, datetime, timedelta

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from townsquare_core import get_logger
from townsquare_core.schemas import AdminLoginResponse
from townsquare_database.models import AdminSession

logger = get_logger(__name__)

DEFAULT_SESSION_HOURS = 24


def _as_aware(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; stored values are always UTC.
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


class AdminAuthService:
    """Administrator session service."""

    def __init__(
        self,
        session: AsyncSession,
        admin_password: str,
        session_hours: int = DEFAULT_SESSION_HOURS,
    ):
        """
        Initialize admin authentication service.

        Args:
            session: Database session.
            admin_password: Configured password. Empty disables login.
            session_hours: Lifetime of issued tokens.
        """
        self.session = session
        self.admin_password = admin_password
        self.session_hours = session_hours

    async def login(self, password: str) -> AdminLoginResponse:
        """
        Exchange the admin password for a bearer token.

        Args:
            password: Password presented by the client.

        Returns:
            Issued token and its expiry.

        Raises:
            ValueError: If login is disabled or the password is wrong.
        """
        if not self.admin_password:
            logger.warning("Admin login attempted but no admin password is configured")
            raise ValueError("Invalid password")

        if not secrets.compare_digest(password.encode(), self.admin_password.encode()):
            logger.warning("Admin login failed")
            raise ValueError("Invalid password")

        await self.purge_expired()

        token = secrets.token_urlsafe(32)
        expires_at = datetime.now(UTC) + timedelta(hours=self.session_hours)
        self.session.add(AdminSession(session_token=token, expires_at=expires_at))
        await self.session.commit()

        logger.info("Admin logged in", extra={"expires_at": expires_at.isoformat()})
        return AdminLoginResponse(token=token, expires_at=expires_at)

    async def logout(self, token: str) -> None:
        """Revoke a token. Unknown tokens are ignored."""
        await self.session.execute(delete(AdminSession).where(AdminSession.session_token == token))
        await self.session.commit()

    async def verify(self, token: str) -> bool:
        """
        Check that a token exists and has not expired.

        Args:
            token: Bearer token.

        Returns:
            True if the token is valid.
        """
        if not token:
            return False

        stmt = select(AdminSession).where(AdminSession.session_token == token)
        result = await self.session.execute(stmt)
        admin_session = result.scalar_one_or_none()
        if admin_session is None:
            return False

        return _as_aware(admin_session.expires_at) > datetime.now(UTC)

    async def purge_expired(self) -> int:
        """Delete expired sessions and return how many were removed."""
        result = await self.session.execute(
            delete(AdminSession).where(AdminSession.expires_at <= datetime.now(UTC))
        )
        await self.session.commit()
        return result.rowcount or 0
