"""
Content schemas.

Request and response models for posts and events.
"""

from datetime import date, datetime, time
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from townsquare_core.schemas.translation import TextDirection

ItemT = TypeVar("ItemT")


class PostCreate(BaseModel):
    """Public post submission."""

    author_name: str = Field(min_length=1, max_length=255)
    author_email: str | None = Field(default=None, max_length=255)
    title: str = Field(min_length=1, max_length=500)
    content: str | None = None
    link_url: str | None = Field(default=None, max_length=2000)
    image_url: str | None = Field(default=None, max_length=2000)
    post_type: str = Field(default="article", min_length=1, max_length=50)
    language: str | None = Field(default=None, max_length=10)
    text_direction: TextDirection | None = None


class EventCreate(BaseModel):
    """Public event submission."""

    organizer_name: str = Field(min_length=1, max_length=255)
    organizer_email: str | None = Field(default=None, max_length=255)
    title: str = Field(min_length=1, max_length=500)
    description: str | None = None
    event_date: date
    event_time: time | None = None
    location: str | None = Field(default=None, max_length=500)
    category: str | None = Field(default=None, max_length=100)
    is_free: bool = True
    ticket_price: float | None = Field(default=None, ge=0)
    ticket_url: str | None = Field(default=None, max_length=2000)
    language: str | None = Field(default=None, max_length=10)
    text_direction: TextDirection | None = None


class PostResponse(BaseModel):
    """Stored post as seen by its submitter and the administrator."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    author_name: str
    author_email: str | None
    title: str
    content: str | None
    link_url: str | None
    image_url: str | None
    post_type: str
    original_language: str
    text_direction: str
    published: bool
    created_at: datetime
    updated_at: datetime


class EventResponse(BaseModel):
    """Stored event as seen by its submitter and the administrator."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    organizer_name: str
    organizer_email: str | None
    title: str
    description: str | None
    event_date: date
    event_time: time | None
    location: str | None
    category: str | None
    is_free: bool
    ticket_price: float | None
    ticket_url: str | None
    original_language: str
    text_direction: str
    published: bool
    created_at: datetime
    updated_at: datetime


class PostView(BaseModel):
    """Published post localized to the reader's language."""

    id: str
    author_name: str
    title: str
    content: str | None
    original_title: str
    original_content: str | None
    link_url: str | None
    image_url: str | None
    post_type: str
    original_language: str
    original_text_direction: str
    text_direction: str
    is_translated: bool
    created_at: datetime


class EventView(BaseModel):
    """Published event localized to the reader's language."""

    id: str
    organizer_name: str
    title: str
    description: str | None
    original_title: str
    original_description: str | None
    event_date: date
    event_time: time | None
    location: str | None
    category: str | None
    is_free: bool
    ticket_price: float | None
    ticket_url: str | None
    original_language: str
    original_text_direction: str
    text_direction: str
    is_translated: bool
    created_at: datetime


class Page(BaseModel, Generic[ItemT]):
    """One page of projected items."""

    items: list[ItemT]
    total: int
    page: int
    limit: int
    total_pages: int


class SubmissionResponse(BaseModel, Generic[ItemT]):
    """Response to a public submission."""

    item: ItemT
    message: str


class PublishResponse(BaseModel):
    """Response to a moderation action."""

    id: str
    kind: str
    published: bool
    message: str
