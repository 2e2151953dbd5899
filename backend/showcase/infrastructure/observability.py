"""Structured Logging — one JSON line per record, carrying the request's collection context.

Invariants:
    - Timestamp is the record's creation time (UTC), not the time it was formatted
    - Only the whitelisted extra fields are surfaced; everything else stays out of the line
    - setup_logging is idempotent: re-running the lifespan replaces, never stacks, its handler

Design Decisions:
    - stdlib logging + a small JSONFormatter, no logging library
    - SQLAlchemy engine chatter pinned to WARNING unless the app itself logs at DEBUG
"""

import json
import logging
from datetime import datetime, timezone

from showcase.config import Settings

HANDLER_NAME = "showcase"

EXTRA_FIELDS = (
    "resource", "resource_id", "author_id", "error_code", "path", "count",
)


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a single JSON object."""

    def __init__(self, fields: tuple[str, ...] = EXTRA_FIELDS):
        super().__init__()
        self._fields = fields

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, getattr(record, key))
            for key in self._fields
            if getattr(record, key, None) is not None
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(settings: Settings) -> logging.Handler:
    """Install the app's root handler according to log_level / log_format."""
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    if settings.log_format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)

    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    root.setLevel(level)
    if level > logging.DEBUG:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    return handler
