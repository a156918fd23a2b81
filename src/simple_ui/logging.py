"""Logging setup shared by the executor and the command line runner."""

from __future__ import annotations

from datetime import datetime, timezone
import logging
import sys
from typing import Any, Dict

import orjson

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_RESERVED_RECORD_ATTRS = set(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}


class JsonFormatter(logging.Formatter):
    """One JSON object per record; ``extra`` fields are merged in."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key in _RESERVED_RECORD_ATTRS or key.startswith("_"):
                continue
            payload[key] = value

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return orjson.dumps(payload, default=repr).decode()


def configure_logging(
    level: str = "INFO",
    *,
    fmt: str = "text",
    name: str = "simple_ui",
) -> logging.Logger:
    """
    Configure the root logger and return the requested logger.

    Args:
        level: Logging level name
        fmt: ``"json"`` for structured records, ``"text"`` for plain lines
        name: Logger to return

    Returns:
        logging.Logger: Logger for ``name``
    """
    root = logging.getLogger()
    root.handlers.clear()
    # stdout carries events, logs go to stderr
    handler = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    root.addHandler(handler)
    root.setLevel(level.upper())
    return logging.getLogger(name)


__all__ = ["JsonFormatter", "configure_logging", "TEXT_FORMAT"]
