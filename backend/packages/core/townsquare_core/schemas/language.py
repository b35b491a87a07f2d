"""
Language schemas.
"""

from pydantic import BaseModel, ConfigDict


class LanguageResponse(BaseModel):
    """Supported language."""

    model_config = ConfigDict(from_attributes=True)

    code: str
    name: str
    native_name: str
    is_rtl: bool
    text_direction: str
    enabled: bool


class LanguageListResponse(BaseModel):
    """List of supported languages."""

    languages: list[LanguageResponse]


class LanguageUpdate(BaseModel):
    """Admin toggle for a language."""

    enabled: bool
