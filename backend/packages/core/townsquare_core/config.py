"""
Translation configuration.

This module provides configuration settings for the translation gateway
and fan-out pipeline loaded from environment variables.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Find .env file in project root
_env_file = Path(__file__).parent.parent.parent.parent.parent / ".env"

GOOGLE_TRANSLATE_URL = "https://translation.googleapis.com/language/translate/v2"


class TranslationConfig(BaseSettings):
    """
    Translation settings from environment variables.

    All settings are prefixed with TRANSLATION_ in environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="TRANSLATION_",
        env_file=str(_env_file) if _env_file.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: str = ""  # Google Cloud API key; empty disables fan-out
    base_url: str = GOOGLE_TRANSLATE_URL
    timeout_seconds: float = 10.0
    fan_out_delay_ms: int = 100  # Courtesy pause before each target language

    @property
    def fan_out_delay_seconds(self) -> float:
        return self.fan_out_delay_ms / 1000


# Global instance
translation_config = TranslationConfig()
