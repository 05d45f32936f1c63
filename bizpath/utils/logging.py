"""Logging setup for the bizpath CLI and library.

Library modules log through `logging.getLogger(__name__)`, which places them
under the `bizpath` namespace. Only the CLI (or a test) calls
`configure_logging`, which attaches a single stderr handler to that
namespace.
"""

import logging
import sys
from typing import TextIO


LOGGER_NAME = "bizpath"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: logging.Handler | None = None


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
    level: str | int | None = None,
    *,
    stream: TextIO | None = None,
    format_string: str = LOG_FORMAT,
    date_format: str = DATE_FORMAT,
) -> logging.Logger:
    """Configure and return the `bizpath` logger.

    Calling this again only changes the level; the handler is created once
    until `reset_logging` is called.

    Args:
        level: Level name or number. Unknown names and None mean INFO.
        stream: Where records go (defaults to stderr).
        format_string: Format string for log messages.
        date_format: Format string for timestamps.
    """
    global _handler

    log_level = _resolve_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    if _handler is None:
        _handler = logging.StreamHandler(stream or sys.stderr)
        _handler.setFormatter(logging.Formatter(format_string, datefmt=date_format))
        logger.handlers.clear()
        logger.addHandler(_handler)
        logger.propagate = False
    _handler.setLevel(log_level)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the `bizpath.<name>` child logger."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def reset_logging() -> None:
    """Remove the handler and levels set by `configure_logging` (for tests)."""
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True

    _handler = None
