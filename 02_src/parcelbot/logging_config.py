"""Structured logging configuration for Parcel Assistant.

Every record is one JSON object. Besides the usual fields it carries a
``context`` mapping built from two sources:

* the dialogue session bound with ``bind_session()`` (current step and error
  count), which follows the asyncio task that bound it into timer callbacks
  scheduled from it;
* per-call fields passed as ``extra=log_context(...)``, which win on clashes.
"""

import json
import logging
import logging.config
import os
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path

from .config import DEFAULT_LOG_PATH

SERVICE_NAME = "parcel-assistant"

# Chatty libraries kept at WARNING unless LOG_LEVEL is stricter
QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")

_session: ContextVar[dict] = ContextVar("parcelbot_session", default={})


class JSONFormatter(logging.Formatter):
    """JSON formatter that merges session and per-call context."""

    def __init__(self, service: str = SERVICE_NAME):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": self.service,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        context = {**_session.get(), **getattr(record, "context", {})}
        if context:
            log_data["context"] = context

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def bind_session(**fields) -> None:
    """Attach dialogue fields to every later record logged from this context."""
    _session.set({**_session.get(), **_drop_none(fields)})


def clear_session() -> None:
    _session.set({})


def log_context(**fields) -> dict:
    """Build the ``extra`` mapping picked up by JSONFormatter as ``context``."""
    return {"context": _drop_none(fields)}


def _drop_none(fields: dict) -> dict:
    return {k: v for k, v in fields.items() if v is not None}


def setup_logging(
    log_level: str | None = None,
    log_file: str | None = None,
) -> None:
    """
    Route all records through JSONFormatter to a rotating file and stdout.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL.
                   Defaults to LOG_LEVEL env var or INFO.
        log_file: Path to log file. Defaults to 04_logs/app.log.
    """
    level = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_path = Path(log_file) if log_file else DEFAULT_LOG_PATH
    log_path.parent.mkdir(parents=True, exist_ok=True)

    quiet_level = level if level in ("ERROR", "CRITICAL") else "WARNING"

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "parcelbot.logging_config.JSONFormatter",
                "service": SERVICE_NAME,
            },
        },
        "handlers": {
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "filename": str(log_path),
                "maxBytes": 10 * 1024 * 1024,  # 10 MB
                "backupCount": 5,
                "formatter": "json",
                "encoding": "utf-8",
            },
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            name: {"level": quiet_level} for name in QUIET_LOGGERS
        },
        "root": {
            "level": level,
            "handlers": ["file", "console"],
        },
    })


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
