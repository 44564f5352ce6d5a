"""Logging configuration using loguru.

Logs always go to stderr; stdout is reserved for decoded output.  stdlib
``logging`` records (pydantic, an embedding application) are routed through
loguru so there is a single sink and format.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from loguru import Logger

    from agwire.protocol.errors import DecodeError

_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


class _InterceptHandler(logging.Handler):
    """Forward stdlib records to loguru, keeping the original call site."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: str = "INFO", *, serialize: bool = False) -> None:
    """Replace loguru's default sink with one stderr sink at *level*.

    With *serialize*, each record is written as one JSON object per line,
    including any extras bound by :func:`rejection_logger`.
    """
    level = level.upper()

    logger.remove()
    if serialize:
        logger.add(sys.stderr, level=level, serialize=True)
    else:
        logger.add(sys.stderr, level=level, format=_FORMAT)

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)

    logger.debug("Logging initialised (level={}, serialize={})", level, serialize)


def rejection_logger(error: DecodeError) -> Logger:
    """Return a logger bound to the location details of *error*."""
    return logger.bind(
        error=type(error).__name__,
        field=error.field,
        path=error.path,
        message_id=error.message_id,
        role=error.role,
    )
