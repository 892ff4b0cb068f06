"""Logging setup for the caisse package.

Records go to a single stream handler on the ``caisse`` logger, either as
plain text or as one JSON object per line.  Context passed through
``extra={"extra": {...}}`` is merged into the JSON record.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Optional, TextIO

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Format log records as JSON strings."""

    def format(self, record: logging.LogRecord) -> str:
        log_record: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "module": record.module,
            "message": record.getMessage(),
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            # merged at top level, never overriding the base fields
            for key, value in extra.items():
                log_record.setdefault(key, value)
        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_record, default=str)


def configure_logging(
    level: int | str = logging.INFO,
    json_output: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure the ``caisse`` logger and return it.

    Args:
        level: Level name or number.
        json_output: Use :class:`JsonFormatter` instead of the text format.
        stream: Target stream, stderr when omitted.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    logger = logging.getLogger("caisse")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter() if json_output else logging.Formatter(_TEXT_FORMAT))
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
