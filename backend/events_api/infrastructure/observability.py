"""Structured Logging: JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Request-scoped extras (ids, error_code, path) surfaced when present
    - At most one Events API handler on the root logger, however often
      setup_logging runs (lifespan restarts, reloads, tests)
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = ("event_id", "attendee_id", "user_id", "error_code", "path")

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """Format logs as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update({
            key: record.__dict__[key]
            for key in EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class _EventsApiHandler(logging.StreamHandler):
    """Marker type so setup_logging can find the handler it installed."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install (or replace) the application's root log handler."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, _EventsApiHandler)]:
        root.removeHandler(existing)
        existing.close()

    handler = _EventsApiHandler()
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
