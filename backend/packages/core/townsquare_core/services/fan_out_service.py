"""
Translation fan-out service.

Translates one published content item into every enabled language and
stores one translation row per language. Runs detached from the request
that published the item, so nothing here raises to its caller: every
failure is logged with its content id, language and field, and the loop
moves on to the next language.
"""

import asyncio
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from townsquare_core import get_logger
from townsquare_core.content_kinds import ContentKind, get_kind_info
from townsquare_core.services.translation_gateway import GatewayError, TranslationGateway
from townsquare_database.models import SupportedLanguage
from townsquare_database.models.base import generate_uuid
from townsquare_database.upsert import build_upsert

logger = get_logger(__name__)

DEFAULT_DELAY_SECONDS = 0.1


def utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass
class FanOutReport:
    """
    Outcome of one fan-out run.

    Attributes:
        kind: Content kind.
        content_id: Content identifier.
        status: "completed", "not_found" or "error".
        translated: Languages stored with title and body.
        partial: Languages stored with title only (body translation failed).
        failed: Languages with no row written in this run.
        skipped: Languages not attempted (the original language).
    """

    kind: ContentKind
    content_id: str
    status: str = "completed"
    translated: list[str] = field(default_factory=list)
    partial: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "kind": self.kind.value,
            "content_id": self.content_id,
            "translated": self.translated,
            "partial": self.partial,
            "failed": self.failed,
            "skipped": self.skipped,
        }


class TranslationFanOutService:
    """Fans one content item out into all enabled languages."""

    def __init__(
        self,
        session: AsyncSession,
        gateway: TranslationGateway,
        delay_seconds: float = DEFAULT_DELAY_SECONDS,
    ) -> None:
        """
        Initialize fan-out service.

        Args:
            session: Database session.
            gateway: Translation gateway.
            delay_seconds: Pause before each language's calls, to stay under
                the translation API's rate limit.
        """
        self.session = session
        self.gateway = gateway
        self.delay_seconds = delay_seconds

    async def fan_out(self, kind: ContentKind, content_id: str) -> FanOutReport:
        """
        Translate a content item into every enabled language.

        Languages are processed sequentially in code order. A title failure
        skips that language; a body failure stores the title with a null body.

        Args:
            kind: Content kind.
            content_id: Content identifier.

        Returns:
            FanOutReport describing what was written.
        """
        kind = ContentKind(kind)
        info = get_kind_info(kind)
        report = FanOutReport(kind=kind, content_id=content_id)

        logger.info(
            "Starting translation fan-out",
            extra={"kind": kind.value, "content_id": content_id},
        )

        try:
            item = await self.session.get(info.model, content_id)
            if item is None:
                logger.warning(
                    "Content not found; nothing to translate",
                    extra={"kind": kind.value, "content_id": content_id},
                )
                report.status = "not_found"
                return report

            # Read everything needed up front; later rollbacks expire ORM state.
            title = item.title
            body = item.body
            source_language = item.original_language

            languages = await self._get_enabled_languages()
            # End the read transaction; translation calls must not hold it open.
            await self.session.commit()
        except SQLAlchemyError:
            logger.exception(
                "Failed to load content for fan-out",
                extra={"kind": kind.value, "content_id": content_id},
            )
            report.status = "error"
            return report

        for language_code, text_direction in languages:
            if language_code == source_language:
                report.skipped.append(language_code)
                continue

            await asyncio.sleep(self.delay_seconds)
            await self._translate_language(
                kind,
                content_id,
                title,
                body,
                source_language,
                language_code,
                text_direction,
                report,
            )

        logger.info(
            "Completed translation fan-out",
            extra={
                "kind": kind.value,
                "content_id": content_id,
                "translated": len(report.translated),
                "partial": len(report.partial),
                "failed": len(report.failed),
            },
        )
        return report

    async def _get_enabled_languages(self) -> list[tuple[str, str]]:
        stmt = (
            select(SupportedLanguage)
            .where(SupportedLanguage.enabled.is_(True))
            .order_by(SupportedLanguage.code)
        )
        result = await self.session.execute(stmt)
        return [(lang.code, lang.text_direction) for lang in result.scalars().all()]

    async def _translate_language(
        self,
        kind: ContentKind,
        content_id: str,
        title: str,
        body: str | None,
        source_language: str,
        language_code: str,
        text_direction: str,
        report: FanOutReport,
    ) -> None:
        log_context = {
            "kind": kind.value,
            "content_id": content_id,
            "language_code": language_code,
        }

        try:
            title_result = await self.gateway.translate_text(title, language_code, source_language)
        except GatewayError as e:
            logger.error(
                "Failed to translate title",
                extra={
                    **log_context,
                    "field": "title",
                    "error_kind": e.kind.value,
                    "error": e.message,
                },
            )
            report.failed.append(language_code)
            return

        translated_body: str | None = None
        body_failed = False
        if body:
            try:
                body_result = await self.gateway.translate_text(
                    body, language_code, source_language
                )
                translated_body = body_result.translated_text
            except GatewayError as e:
                body_failed = True
                logger.error(
                    "Failed to translate body",
                    extra={
                        **log_context,
                        "field": "body",
                        "error_kind": e.kind.value,
                        "error": e.message,
                    },
                )

        try:
            await self.upsert_translation(
                kind,
                content_id,
                language_code,
                title_result.translated_text,
                translated_body,
                text_direction,
            )
        except IntegrityError:
            await self.session.rollback()
            logger.exception(
                "Translation upsert violated a constraint",
                extra={**log_context, "field": "row"},
            )
            report.failed.append(language_code)
            return
        except SQLAlchemyError:
            await self.session.rollback()
            logger.exception(
                "Failed to store translation",
                extra={**log_context, "field": "row"},
            )
            report.failed.append(language_code)
            return

        if body_failed:
            report.partial.append(language_code)
        else:
            report.translated.append(language_code)
        logger.info("Stored translation", extra=log_context)

    async def upsert_translation(
        self,
        kind: ContentKind,
        content_id: str,
        language_code: str,
        title: str,
        body: str | None,
        text_direction: str,
    ) -> None:
        """
        Insert or overwrite the translation row for (content_id, language_code).

        Runs as one INSERT ... ON CONFLICT DO UPDATE statement and commits,
        so each language is stored independently of the others.

        Args:
            kind: Content kind.
            content_id: Content identifier.
            language_code: Target language code.
            title: Translated title.
            body: Translated body, or None.
            text_direction: Direction stored with the row.
        """
        info = get_kind_info(kind)
        table = info.translation_model.__table__
        stmt = build_upsert(
            self.session.get_bind().dialect.name,
            table,
            values={
                "id": generate_uuid(),
                info.foreign_key: content_id,
                "language_code": language_code,
                "title": title,
                info.body_column: body,
                "text_direction": text_direction,
                "translated_at": utcnow(),
            },
            conflict_columns=(info.foreign_key, "language_code"),
            update_columns=("title", info.body_column, "text_direction", "translated_at"),
        )
        await self.session.execute(stmt)
        await self.session.commit()
