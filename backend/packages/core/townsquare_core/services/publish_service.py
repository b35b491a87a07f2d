"""
Publish service.

Moderation transitions for posts and events. Publishing flips the flag,
commits, then queues a translation fan-out job without waiting for it.
"""

from datetime import UTC, datetime

from arq.connections import ArqRedis
from sqlalchemy.ext.asyncio import AsyncSession

from townsquare_core import get_logger
from townsquare_core.content_kinds import ContentKind, get_kind_info
from townsquare_core.schemas import PublishResponse

logger = get_logger(__name__)

FAN_OUT_TASK_NAME = "fan_out_translations_task"


class PublishService:
    """Moderation service for publishing and unpublishing content."""

    def __init__(self, session: AsyncSession, redis_pool: ArqRedis | None = None):
        self.session = session
        self.redis_pool = redis_pool

    async def publish(self, kind: ContentKind, content_id: str) -> PublishResponse:
        """
        Publish a content item and schedule its translation fan-out.

        The response does not wait for translations. Re-publishing an item
        that is already published schedules a new fan-out, which refreshes
        every translation row.

        Args:
            kind: Content kind.
            content_id: Content identifier.

        Returns:
            PublishResponse for the item.

        Raises:
            ValueError: If the item does not exist.
        """
        kind = ContentKind(kind)
        info = get_kind_info(kind)

        item = await self.session.get(info.model, content_id)
        if item is None:
            raise ValueError(f"{kind.value.capitalize()} not found")

        item.published = True
        item.updated_at = datetime.now(UTC)
        await self.session.commit()

        logger.info(
            "Published content",
            extra={"kind": kind.value, "content_id": content_id},
        )

        await self._schedule_fan_out(kind, content_id)

        return PublishResponse(
            id=content_id,
            kind=kind.value,
            published=True,
            message=f"{kind.value.capitalize()} published; translations are being generated",
        )

    async def unpublish(self, kind: ContentKind, content_id: str) -> PublishResponse:
        """
        Hide a content item from readers. Translations are kept.

        Raises:
            ValueError: If the item does not exist.
        """
        kind = ContentKind(kind)
        info = get_kind_info(kind)

        item = await self.session.get(info.model, content_id)
        if item is None:
            raise ValueError(f"{kind.value.capitalize()} not found")

        item.published = False
        item.updated_at = datetime.now(UTC)
        await self.session.commit()

        logger.info(
            "Unpublished content",
            extra={"kind": kind.value, "content_id": content_id},
        )

        return PublishResponse(
            id=content_id,
            kind=kind.value,
            published=False,
            message=f"{kind.value.capitalize()} unpublished",
        )

    async def _schedule_fan_out(self, kind: ContentKind, content_id: str) -> None:
        if self.redis_pool is None:
            logger.warning(
                "No task queue available; translations were not scheduled",
                extra={"kind": kind.value, "content_id": content_id},
            )
            return

        try:
            await self.redis_pool.enqueue_job(
                FAN_OUT_TASK_NAME,
                kind=kind.value,
                content_id=content_id,
            )
            logger.info(
                "Queued translation fan-out",
                extra={"kind": kind.value, "content_id": content_id},
            )
        except Exception:
            logger.exception(
                "Failed to queue translation fan-out",
                extra={"kind": kind.value, "content_id": content_id},
            )
