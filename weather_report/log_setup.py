"""Logging setup for the weather report client."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

from .config import LOG_LEVEL
from .network import redact_url

PACKAGE_LOGGER = "weather_report"


def _redact(text: str) -> str:
    """Redact the API key from any URL embedded in a log message."""
    if "appid=" not in text:
        return text
    return " ".join(redact_url(part) if "appid=" in part else part for part in text.split(" "))


class JsonConsoleFormatter(logging.Formatter):
    """Simple JSON formatter for structured console logs."""

    def format(self, record: logging.LogRecord) -> str:
        event: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": _redact(record.getMessage()),
        }
        if record.exc_info:
            event["exception"] = self.formatException(record.exc_info)
        return json.dumps(event, default=str)


def setup_logger(name: str = PACKAGE_LOGGER, level: int | str = LOG_LEVEL) -> logging.Logger:
    """Create and configure the package logger."""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(JsonConsoleFormatter())
    logger.addHandler(handler)
    return logger
