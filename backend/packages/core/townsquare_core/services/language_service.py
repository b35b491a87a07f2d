"""
Language service.

Reads and toggles the set of supported languages.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from townsquare_core import get_logger
from townsquare_core.schemas import LanguageResponse
from townsquare_database.models import SupportedLanguage

logger = get_logger(__name__)


class LanguageService:
    """Supported language management service."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_enabled(self) -> list[LanguageResponse]:
        """List enabled languages ordered by name."""
        stmt = (
            select(SupportedLanguage)
            .where(SupportedLanguage.enabled.is_(True))
            .order_by(SupportedLanguage.name)
        )
        result = await self.session.execute(stmt)
        return [LanguageResponse.model_validate(lang) for lang in result.scalars().all()]

    async def list_all(self) -> list[LanguageResponse]:
        """List all languages, enabled or not, ordered by name."""
        stmt = select(SupportedLanguage).order_by(SupportedLanguage.name)
        result = await self.session.execute(stmt)
        return [LanguageResponse.model_validate(lang) for lang in result.scalars().all()]

    async def set_enabled(self, code: str, enabled: bool) -> LanguageResponse:
        """
        Enable or disable a language for future fan-outs.

        Existing translations into a disabled language are kept.

        Args:
            code: Language code.
            enabled: New state.

        Returns:
            The updated language.

        Raises:
            ValueError: If the language does not exist.
        """
        language = await self.session.get(SupportedLanguage, code)
        if language is None:
            raise ValueError(f"Language {code} not found")

        language.enabled = enabled
        await self.session.commit()

        logger.info(
            "Language toggled",
            extra={"language_code": code, "enabled": enabled},
        )
        return LanguageResponse.model_validate(language)
