"""Structured logging setup.

configure_logging() installs a root handler that writes one JSON object
per line: level, message, timestamp, logger, plus any `extra` fields
passed to the logging call.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

SENSITIVE_KEYS = {"password", "token", "authorization"}
REDACTED = "[REDACTED]"

# Attributes present on every LogRecord; anything else came from `extra`
_RESERVED_ATTRS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def sanitize(data: Any) -> Any:
    """Redact sensitive keys in nested dicts and lists."""
    if isinstance(data, dict):
        return {
            key: REDACTED if str(key).lower() in SENSITIVE_KEYS else sanitize(value)
            for key, value in data.items()
        }
    if isinstance(data, (list, tuple)):
        return [sanitize(value) for value in data]
    return data


class JsonFormatter(logging.Formatter):
    """Format log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "level": record.levelname.lower(),
            "message": record.getMessage(),
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "logger": record.name,
        }

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                payload[key] = value

        if record.exc_info:
            payload["trace"] = self.formatException(record.exc_info)

        return json.dumps(sanitize(payload), default=str)


def configure_logging(level: str = "INFO", json_format: bool = True) -> None:
    """Configure the root logger.

    Replaces existing root handlers so repeated calls (one per app
    instance in tests) do not duplicate output.

    Args:
        level: Log level name.
        json_format: Emit JSON lines instead of plain text.
    """
    handler = logging.StreamHandler(sys.stdout)
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)
