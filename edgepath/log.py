"""Logging setup for the CLI.

Library modules only create module loggers; handlers are attached here, once
per process, to the ``edgepath`` and ``edgepath_core`` loggers.
"""

from __future__ import annotations

import json
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

LOGGER_NAMES = ("edgepath", "edgepath_core")


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _build_handler(fmt: str) -> logging.Handler:
    if fmt == "json":
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(JsonFormatter())
        return handler
    return RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )


def configure_logging(level: str = "warn", fmt: str = "text") -> None:
    """Attach a single stderr handler to the project loggers."""
    handler = _build_handler(fmt)
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        for existing in list(logger.handlers):
            logger.removeHandler(existing)
        logger.addHandler(handler)
        logger.setLevel(_LEVELS.get(level, logging.WARNING))
