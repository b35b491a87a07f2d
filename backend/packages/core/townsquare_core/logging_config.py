"""
Logging configuration.

Modules log through ``get_logger(__name__)`` and pass structured context
with ``extra={...}``. The formatters below render those extra fields so
they survive into plain-text and JSON log lines.
"""

import json
import logging
import os
import sys
from datetime import UTC, datetime
from typing import Any

# Attributes every LogRecord carries; anything else came from ``extra``.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys()
    | {"message", "asctime", "taskName"}
)

_ROOT_LOGGER_NAME = "townsquare"
_configured = False


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value for key, value in record.__dict__.items() if key not in _RESERVED_ATTRS
    }


class KeyValueFormatter(logging.Formatter):
    """Human-readable formatter appending ``key=value`` context pairs."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = _extra_fields(record)
        if not extras:
            return base
        pairs = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
        return f"{base} | {pairs}"


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(_extra_fields(record))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, ensure_ascii=False)


def init_logging(level: str | None = None, fmt: str | None = None) -> None:
    """
    Configure the ``townsquare`` logger hierarchy.

    Safe to call more than once; only the first call installs a handler.

    Args:
        level: Log level name. Defaults to ``LOG_LEVEL`` or INFO.
        fmt: "text" or "json". Defaults to ``LOG_FORMAT`` or text.
    """
    global _configured

    resolved_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    resolved_fmt = (fmt or os.getenv("LOG_FORMAT", "text")).lower()

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.setLevel(resolved_level)

    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    if resolved_fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            KeyValueFormatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
        )
    root.addHandler(handler)
    root.propagate = False
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger inside the ``townsquare`` hierarchy.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger instance.
    """
    if name.startswith(f"{_ROOT_LOGGER_NAME}_") or name.startswith(f"{_ROOT_LOGGER_NAME}."):
        # townsquare_core.services.x -> townsquare.core.services.x
        name = f"{_ROOT_LOGGER_NAME}.{name[len(_ROOT_LOGGER_NAME) + 1:]}"
    elif name != _ROOT_LOGGER_NAME:
        name = f"{_ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
