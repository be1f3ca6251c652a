from __future__ import annotations

import json
import logging
import os

# Extra fields the store attaches to its log records.
FIELDS = ("event_type", "path", "key", "line_no", "type_tag", "entries", "error")


class JsonFormatter(logging.Formatter):
    """Very small JSON formatter for structured logs."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - short
        payload = {
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in FIELDS:
            payload[name] = getattr(record, name, None)
        if payload["event_type"] is None:
            payload["event_type"] = record.getMessage()
        return json.dumps(payload, default=str)


def configure_logging(level: str | int | None = None) -> None:
    """Configure logging.

    Default format is human friendly, but when ``LOG_FORMAT=json`` is set the
    output becomes one JSON object per line carrying the store's extra fields.
    """

    if level is None:
        level = os.getenv("LOG_LEVEL", "WARNING").upper()

    fmt = os.getenv("LOG_FORMAT", "plain").lower()
    if fmt == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logging.basicConfig(level=level, handlers=[handler], force=True)
    else:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%H:%M:%S",
            force=True,
        )
