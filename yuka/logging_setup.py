"""File logging for the booking app.

The terminal belongs to Textual while the app runs, so log records go to
a debug file instead of a stream handler.
"""

from __future__ import annotations

import logging
from pathlib import Path

from yuka.config import DEBUG_LOG_PATH, LOG_LEVEL

LOGGER_NAME = "yuka"
_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _resolve_level(level: str) -> int:
    """Map a level name to its number, falling back to INFO for unknown names."""
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(path: str | Path = DEBUG_LOG_PATH, level: str = LOG_LEVEL) -> logging.Logger:
    """Attach a file handler to the ``yuka`` logger (idempotent)."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_resolve_level(level))
    logger.propagate = False

    log_file = Path(path)
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename).resolve() == log_file.resolve():
            return logger

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError:
        # Logging must never interfere with app flow.
        if not any(type(existing) is logging.NullHandler for existing in logger.handlers):
            logger.addHandler(logging.NullHandler())
        return logger

    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child of the ``yuka`` logger."""
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
