"""
Translation schemas.

Results returned by the translation gateway.
"""

from typing import Literal

from pydantic import BaseModel

TextDirection = Literal["ltr", "rtl"]


class TranslationResult(BaseModel):
    """One translated text."""

    translated_text: str
    source_language: str
    target_language: str
    text_direction: TextDirection
    confidence: float = 1.0


class LanguageDetectionResult(BaseModel):
    """Detected language of a text."""

    language: str
    confidence: float
    is_rtl: bool
    text_direction: TextDirection
