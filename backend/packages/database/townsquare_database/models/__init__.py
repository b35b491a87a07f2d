"""
Database models package.

This module exports all SQLAlchemy models for the Townsquare application.
"""

from .admin_session import AdminSession
from .base import Base, TimestampMixin
from .content_translation import EventTranslation, PostTranslation
from .event import Event
from .language import SupportedLanguage
from .post import Post

__all__ = [
    "Base",
    "TimestampMixin",
    "SupportedLanguage",
    "Post",
    "Event",
    # Translation models
    "PostTranslation",
    "EventTranslation",
    # Admin
    "AdminSession",
]
