"""Centralized logging configuration for routefinder."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict, Optional, TextIO

from .config import ObservabilityConfig

ROOT_LOGGER_NAME = "routefinder"

# Attributes every LogRecord carries; anything else came in through ``extra``
_RECORD_ATTRIBUTES = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}

_configured = False


class StructuredFormatter(logging.Formatter):
    """Format each record as one JSON object, ``extra`` fields included."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record),
            "logger": record.name,
            "level": record.levelname,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES:
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def setup_logging(
    config: Optional[ObservabilityConfig] = None,
    stream: Optional[TextIO] = None,
    force: bool = False,
) -> logging.Logger:
    """Set up the package logger with a single handler.

    Logs go to stderr by default so that stdout only carries the JSON
    document produced by the command line.

    Args:
        config: Logging settings (defaults to environment-driven settings).
        stream: Stream to write to (defaults to stderr).
        force: Replace a handler installed by an earlier call.

    Returns:
        The configured package logger.
    """
    global _configured

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _configured and not force:
        return root_logger

    config = config or ObservabilityConfig()
    root_logger.setLevel(config.level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    if config.structured:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))
    root_logger.addHandler(handler)

    # Let logs propagate to the root logger so pytest can capture them
    root_logger.propagate = True

    _configured = True
    return root_logger


def set_log_level(level: str) -> None:
    """Set the level of every routefinder logger."""
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(level.upper())
