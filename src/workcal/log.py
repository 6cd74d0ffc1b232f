"""
WorkCal Logging Setup

Structured JSON logging for command-line and service use. The library
itself only creates module loggers; applications opt in by calling
configure_logging().

Environment:
    WORKCAL_LOG_LEVEL: default level when none is passed (default WARNING)
"""
from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from typing import Optional

WORKCAL_LOG_LEVEL = os.getenv("WORKCAL_LOG_LEVEL", "WARNING")

# LogRecord attributes copied into the JSON entry when present
_EXTRA_FIELDS = ("calendar", "window_start", "window_end", "command")


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in _EXTRA_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a JSON stream handler to the workcal logger.

    Calling it again only updates the level.

    Args:
        level: Level name; falls back to WORKCAL_LOG_LEVEL

    Returns:
        The package logger
    """
    logger = logging.getLogger("workcal")
    logger.setLevel(getattr(logging, (level or WORKCAL_LOG_LEVEL).upper()))

    if not any(getattr(h, "_workcal_json", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
        handler._workcal_json = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
