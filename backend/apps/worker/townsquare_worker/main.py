"""
Townsquare Worker - arq entry point.

Run with ``arq townsquare_worker.main.WorkerSettings``.
"""

from typing import Any

import httpx
from arq.connections import RedisSettings

from townsquare_core import get_logger, init_logging
from townsquare_core.config import translation_config
from townsquare_core.services import create_translation_gateway
from townsquare_database.session import close_database, init_database

from .config import settings
from .tasks.translation import fan_out_translations_task

logger = get_logger(__name__)


async def startup(ctx: dict[str, Any]) -> None:
    """
    Worker startup handler.

    Opens the database engine and one HTTP client shared by every job.
    """
    init_logging()
    init_database(settings.database_url)

    http_client = httpx.AsyncClient(timeout=translation_config.timeout_seconds)
    ctx["http_client"] = http_client
    ctx["translation_gateway"] = create_translation_gateway(translation_config, http_client)
    logger.info("Townsquare worker started")


async def shutdown(ctx: dict[str, Any]) -> None:
    """Worker shutdown handler."""
    http_client = ctx.get("http_client")
    if http_client is not None:
        await http_client.aclose()
    await close_database()
    logger.info("Townsquare worker stopped")


class WorkerSettings:
    """arq worker configuration."""

    functions = [fan_out_translations_task]
    on_startup = startup
    on_shutdown = shutdown
    redis_settings = RedisSettings.from_dsn(settings.redis_url)
    max_jobs = settings.max_jobs
    job_timeout = settings.job_timeout_seconds
