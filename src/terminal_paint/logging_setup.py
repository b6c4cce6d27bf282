"""Local file logging.

The editor owns the terminal, so records never go to the console.
The package logger carries a NullHandler, so without a configured file
nothing is written anywhere.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "terminal_paint"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(path: str | Path, level: int = logging.INFO) -> logging.Logger:
    """Send package log records to a file. Calling again is a no-op."""
    logger = logging.getLogger(_LOGGER_NAME)
    if any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        return logger

    logger.setLevel(level)
    handler = logging.FileHandler(Path(path), encoding="utf-8")
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    logger.info("logging configured")
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)
