"""Translation fan-out task.

Runs after an administrator publishes a post or event and writes one
translation row per enabled language.
"""

from typing import Any

from townsquare_core import get_logger
from townsquare_core.config import translation_config
from townsquare_core.content_kinds import ContentKind
from townsquare_core.services import TranslationFanOutService
from townsquare_database.session import get_session_context

logger = get_logger(__name__)


async def fan_out_translations_task(
    ctx: dict[str, Any],
    kind: str,
    content_id: str,
) -> dict[str, Any]:
    """
    Translate a published content item into every enabled language.

    Args:
        ctx: Worker context; holds the shared translation gateway.
        kind: Content kind ("post" or "event").
        content_id: Content identifier.

    Returns:
        Result dictionary with status and per-language outcome lists.
    """
    gateway = ctx.get("translation_gateway")
    if gateway is None:
        logger.warning(
            "Translation gateway not configured; skipping fan-out",
            extra={"kind": kind, "content_id": content_id},
        )
        return {"status": "skipped", "kind": kind, "content_id": content_id}

    try:
        content_kind = ContentKind(kind)
    except ValueError:
        logger.error("Unknown content kind", extra={"kind": kind, "content_id": content_id})
        return {"status": "error", "kind": kind, "content_id": content_id}

    async with get_session_context() as session:
        service = TranslationFanOutService(
            session,
            gateway,
            delay_seconds=translation_config.fan_out_delay_seconds,
        )
        report = await service.fan_out(content_kind, content_id)

    return report.as_dict()
