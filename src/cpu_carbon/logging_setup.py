"""Logging configuration for the cpu-carbon command-line surface."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

PACKAGE_LOGGER = "cpu_carbon"

_STRUCTURED_RESERVED_KEYS: frozenset[str] = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
    }
)


class JsonFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - inherited
        context = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _STRUCTURED_RESERVED_KEYS
        }
        payload: dict[str, object] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "context": context,
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def configure_logging(
    level: int | str = logging.WARNING, *, structured: bool = False
) -> logging.Logger:
    """Attach a single stderr handler to the ``cpu_carbon`` logger.

    Calling this again replaces the handler installed by a previous call.

    Args:
        level: Level number or name. Unknown names fall back to ``WARNING``.
        structured: Emit JSON lines via :class:`JsonFormatter` when ``True``.

    Returns:
        The configured package logger.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(_resolve_level(level))

    for handler in list(logger.handlers):
        if getattr(handler, "_cpu_carbon_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler._cpu_carbon_handler = True  # type: ignore[attr-defined]
    if structured:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(levelname)s %(name)s: %(message)s")
        )
    logger.addHandler(handler)
    return logger
