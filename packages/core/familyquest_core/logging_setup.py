"""JSON-lines logging for the card engine and CLI."""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .config import app_dir

_LOGGER_NAME = "familyquest"
LOG_FILENAME = "familyquest.log"

# Structured fields the renderer and export sinks attach through ``extra=``.
CARD_FIELDS = ("event", "template_id", "layout", "duration_ms", "size_bytes", "backend", "target")


def log_dir() -> Path:
    path = app_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


class JsonFormatter(logging.Formatter):
    """One JSON object per line; card fields become top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for name in CARD_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                payload[name] = value
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def _has_file_handler(logger: logging.Logger) -> bool:
    return any(isinstance(h, logging.handlers.TimedRotatingFileHandler) for h in logger.handlers)


def configure_logging(
    keep_files: int = 7,
    console: bool = True,
    directory: Path | None = None,
    level: int = logging.INFO,
) -> logging.Logger:
    """Attach the rotating JSON file handler to the ``familyquest`` logger once."""
    logger = logging.getLogger(_LOGGER_NAME)
    if _has_file_handler(logger):
        return logger

    logger.setLevel(level)
    path = (directory or log_dir()) / LOG_FILENAME
    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.handlers.TimedRotatingFileHandler(
        filename=str(path),
        when="midnight",
        backupCount=max(2, keep_files),
        encoding="utf-8",
    )
    file_handler.setFormatter(JsonFormatter())
    logger.addHandler(file_handler)

    if console:
        # stdout carries the CLI's JSON output.
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(console_handler)

    logger.info(f"logging to {path}", extra={"event": "logging_configured", "target": str(path)})
    return logger
