"""
Admin session model.
"""

from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, generate_uuid


class AdminSession(Base):
    """
    Opaque bearer token issued to the administrator.

    Attributes:
        id: Unique session identifier (UUID).
        session_token: Random token presented as ``Authorization: Bearer``.
        created_at: Issue time.
        expires_at: Token is rejected after this moment.
    """

    __tablename__ = "admin_sessions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    session_token: Mapped[str] = mapped_column(String(128), unique=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
