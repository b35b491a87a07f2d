"""
Event model definition.
"""

from datetime import date, time
from decimal import Decimal

from sqlalchemy import Boolean, Date, ForeignKey, Numeric, String, Text, Time
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin, generate_uuid


class Event(Base, TimestampMixin):
    """
    Community event.

    Shares the moderation and translation lifecycle of posts; the
    translatable body is ``description``.

    Attributes:
        id: Unique event identifier (UUID).
        organizer_name: Display name of the organizer.
        organizer_email: Optional contact address of the organizer.
        title: Event title in the original language.
        description: Optional event description in the original language.
        event_date: Day the event takes place.
        event_time: Optional start time.
        location: Optional venue.
        category: Optional category used for filtering.
        is_free: Whether attendance is free.
        ticket_price: Optional ticket price.
        ticket_url: Optional ticketing link.
        original_language: Language code the event was written in.
        text_direction: Direction of the original text ("ltr" or "rtl").
        published: Whether the event is visible to readers.
    """

    __tablename__ = "events"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    organizer_name: Mapped[str] = mapped_column(String(255), nullable=False)
    organizer_email: Mapped[str | None] = mapped_column(String(255))
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    event_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    event_time: Mapped[time | None] = mapped_column(Time)
    location: Mapped[str | None] = mapped_column(String(500))
    category: Mapped[str | None] = mapped_column(String(100), index=True)
    is_free: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    ticket_price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))
    ticket_url: Mapped[str | None] = mapped_column(String(2000))
    original_language: Mapped[str] = mapped_column(
        String(10), ForeignKey("supported_languages.code"), nullable=False
    )
    text_direction: Mapped[str] = mapped_column(String(3), nullable=False, default="ltr")
    published: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)

    @property
    def body(self) -> str | None:
        """Translatable body text."""
        return self.description
