"""Logging configuration for the catalog persistence layer.

Provides a JSON formatted logger named ``catalog_admin``. Repositories log
with ``extra={"entity": ..., "entity_id": ...}``; those keys are lifted to
the top level of each JSON line so records can be grouped per aggregate.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from .config.settings import settings

LOG_NAME = "catalog_admin"
STREAM_HANDLER_NAME = f"{LOG_NAME}.stream"
FILE_HANDLER_NAME = f"{LOG_NAME}.file"
HANDLER_NAMES = frozenset({STREAM_HANDLER_NAME, FILE_HANDLER_NAME})
MAX_BYTES = 5 * 1024 * 1024
BACKUP_COUNT = 5

# Keys promoted out of the "extra" object.
TOP_LEVEL_FIELDS = ("request_id", "entity", "entity_id")

# Whatever a bare record carries is not an extra field.
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


class JsonFormatter(logging.Formatter):
    """Formatter returning log records as JSON strings."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extras = {k: v for k, v in vars(record).items() if k not in _RECORD_ATTRS}
        for key in TOP_LEVEL_FIELDS:
            value = extras.pop(key, None)
            if value is not None:
                payload[key] = value
        if extras:
            payload["extra"] = extras
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def _owned_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if h.get_name() in HANDLER_NAMES]


def get_logger(log_file: Path | None = None) -> logging.Logger:
    """Return the configured project logger.

    The stream and rotating file handlers are attached on the first call.
    Handlers added by anyone else do not count as configuration.
    """
    logger = logging.getLogger(LOG_NAME)
    if _owned_handlers(logger):
        return logger

    logger.setLevel(logging.DEBUG)
    formatter = JsonFormatter()

    stream_handler = logging.StreamHandler()
    stream_handler.set_name(STREAM_HANDLER_NAME)
    stream_handler.setLevel(settings.log_level)
    stream_handler.setFormatter(formatter)

    path = log_file or settings.log_file
    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        path,
        maxBytes=MAX_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.set_name(FILE_HANDLER_NAME)
    file_handler.setLevel(settings.log_level)
    file_handler.setFormatter(formatter)

    logger.addHandler(stream_handler)
    logger.addHandler(file_handler)
    logger.propagate = False
    return logger
