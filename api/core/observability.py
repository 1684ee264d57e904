"""
Logging setup.

Call `setup_logging()` once on startup (the app lifespan does this).
JSON lines by default; set LOG_FORMAT to anything else for plain text.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone

_EXTRA_FIELDS = ("method", "path", "status", "failure_kind")

_HANDLER_NAME = "articles-api"


class JSONFormatter(logging.Formatter):
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
        return json.dumps(log, ensure_ascii=False, default=str)


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def log_format() -> str:
    return os.environ.get("LOG_FORMAT", "json").strip().lower() or "json"


def setup_logging(level: str | None = None, fmt: str | None = None) -> logging.Handler:
    level = (level or log_level()).upper()
    fmt = (fmt or log_format()).lower()

    root = logging.getLogger()
    # Re-running setup (tests, reloads) replaces our handler instead of stacking another.
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level, logging.INFO))
    return handler
