"""
Content translation model definitions.

This module defines the PostTranslation and EventTranslation models for
storing machine-translated versions of published content.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, generate_uuid


class PostTranslation(Base):
    """
    Translated post content.

    One row per (post, language). Rows are written exclusively through an
    insert-or-update statement so a re-run overwrites instead of duplicating.

    Attributes:
        id: Unique translation identifier (UUID).
        post_id: Parent post reference.
        language_code: Target language code.
        title: Translated title.
        content: Translated body, None when only the title could be translated.
        text_direction: Direction the translated text is rendered in.
        translated_at: When the row was last written.
    """

    __tablename__ = "post_translations"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    post_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    language_code: Mapped[str] = mapped_column(
        String(10), ForeignKey("supported_languages.code"), nullable=False
    )
    title: Mapped[str] = mapped_column(String(1000), nullable=False)
    content: Mapped[str | None] = mapped_column(Text)
    text_direction: Mapped[str] = mapped_column(String(3), nullable=False)
    translated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("post_id", "language_code", name="uq_post_translation_lang"),
    )

    @property
    def body(self) -> str | None:
        return self.content


class EventTranslation(Base):
    """
    Translated event content.

    Same lifecycle and uniqueness rules as PostTranslation; the body
    column is ``description``.
    """

    __tablename__ = "event_translations"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    event_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("events.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    language_code: Mapped[str] = mapped_column(
        String(10), ForeignKey("supported_languages.code"), nullable=False
    )
    title: Mapped[str] = mapped_column(String(1000), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    text_direction: Mapped[str] = mapped_column(String(3), nullable=False)
    translated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("event_id", "language_code", name="uq_event_translation_lang"),
    )

    @property
    def body(self) -> str | None:
        return self.description
