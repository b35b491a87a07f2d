"""
Service layer.

Business logic services for the application.
"""

from .admin_auth_service import AdminAuthService
from .content_service import ContentService
from .fan_out_service import FanOutReport, TranslationFanOutService
from .language_service import LanguageService
from .projection_service import ContentFilters, ProjectionService
from .publish_service import PublishService
from .translation_gateway import (
    GatewayError,
    GatewayErrorKind,
    GoogleTranslateGateway,
    TranslationGateway,
    create_translation_gateway,
)

__all__ = [
    "AdminAuthService",
    "ContentService",
    "LanguageService",
    "ProjectionService",
    "ContentFilters",
    "PublishService",
    # Translation
    "TranslationFanOutService",
    "FanOutReport",
    "TranslationGateway",
    "GoogleTranslateGateway",
    "GatewayError",
    "GatewayErrorKind",
    "create_translation_gateway",
]
