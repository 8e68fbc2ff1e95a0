"""Structured Logging — JSON formatter and setup for the API process.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (function_name, arity, error_code, path, ern, order) surfaced when present
    - JSON format by default, human-readable when log_format != "json"
    - setup_logging is idempotent: repeated calls replace its own handler
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_FIELDS = ("function_name", "arity", "error_code", "path", "ern", "order")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

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


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging for the application."""
    for existing in list(logging.root.handlers):
        if getattr(existing, "_fnfun_handler", False):
            logging.root.removeHandler(existing)
    handler = logging.StreamHandler()
    handler._fnfun_handler = True
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
