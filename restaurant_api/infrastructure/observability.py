"""Structured Logging — JSON log lines keyed by table, menu item and error kind.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Order operations carry table_id / item_id; RestaurantError logs add
      error_code, category, severity and the internal lock detail
    - Request-scoped lines (error handlers) add path and method
    - setup_logging replaces its own handler, so lifespan restarts never duplicate output

Design Decisions:
    - LOG_FORMAT=text switches to a plain formatter for local runs
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "table_id", "item_id",
    "error_code", "category", "severity", "detail",
    "path", "method",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    handler.set_name("restaurant_api")
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    for existing in list(logging.root.handlers):
        if existing.get_name() == "restaurant_api":
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
