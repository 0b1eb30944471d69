"""
Central logging configuration.

Goals:
- One shared logging setup for the API process (app + uvicorn).
- JSON logs to stdout for easy aggregation.
- Correlate logs for one upload via request_id / document_name.

Prototype-friendly (no external deps).
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from logging.config import dictConfig

from app.core.request_context import get_context

# Attributes every LogRecord carries; anything else came in via `extra={...}`.
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", None, None)).keys() | {"message", "asctime", "taskName"}
)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        # Include contextvars (request/document)
        base.update(get_context())

        # Include any `extra={...}` fields (best-effort, non-JSON values are stringified)
        for k, v in record.__dict__.items():
            if k in _RECORD_ATTRS or k.startswith("_") or k in base:
                continue
            try:
                json.dumps(v)
                base[k] = v
            except (TypeError, ValueError):
                base[k] = str(v)

        if record.exc_info:
            base["exc"] = self.formatException(record.exc_info)

        return json.dumps(base, ensure_ascii=False)


def configure_logging(level: str | None = None) -> None:
    """
    Call once at process startup. LOG_LEVEL env wins when no level is given.
    """
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    handler = {"level": level, "handlers": ["console"], "propagate": False}
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {"()": "app.core.logging_config.JsonFormatter"},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                    "stream": sys.stdout,
                }
            },
            "root": {"level": level, "handlers": ["console"]},
            "loggers": {
                "uvicorn": dict(handler),
                "uvicorn.error": dict(handler),
                "uvicorn.access": dict(handler),
                # The Gen AI SDK logs every HTTP call at INFO
                "httpx": {"level": "WARNING"},
                "google_genai": {"level": "WARNING"},
            },
        }
    )
