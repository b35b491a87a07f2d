"""
Pydantic schemas for API requests and responses.
"""

from .admin import AdminLoginRequest, AdminLoginResponse
from .content import (
    EventCreate,
    EventResponse,
    EventView,
    Page,
    PostCreate,
    PostResponse,
    PostView,
    PublishResponse,
    SubmissionResponse,
)
from .language import LanguageListResponse, LanguageResponse, LanguageUpdate
from .translation import LanguageDetectionResult, TranslationResult

__all__ = [
    # Admin
    "AdminLoginRequest",
    "AdminLoginResponse",
    # Content
    "PostCreate",
    "PostResponse",
    "PostView",
    "EventCreate",
    "EventResponse",
    "EventView",
    "Page",
    "SubmissionResponse",
    "PublishResponse",
    # Language
    "LanguageResponse",
    "LanguageListResponse",
    "LanguageUpdate",
    # Translation
    "TranslationResult",
    "LanguageDetectionResult",
]
