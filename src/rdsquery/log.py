"""Diagnostic logging on stderr, level picked by the -v count.

Standard-library logging (sqlglot, botocore) is routed into loguru. Those
libraries stay quiet below -vv so a plain run writes nothing to stderr.
"""

from __future__ import annotations

import inspect
import logging
import sys

from loguru import logger

_LEVELS = ("WARNING", "INFO", "DEBUG", "TRACE")
_STDLIB_LEVELS = (logging.ERROR, logging.ERROR, logging.WARNING, logging.DEBUG)


class InterceptHandler(logging.Handler):
    """Forward standard-library log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _clamp(verbosity: int, levels: tuple) -> object:
    return levels[min(max(verbosity, 0), len(levels) - 1)]


def level_for(verbosity: int) -> str:
    """loguru level name for a -v count."""
    return _clamp(verbosity, _LEVELS)


def stdlib_level_for(verbosity: int) -> int:
    """Root logging level for third-party libraries at a -v count."""
    return _clamp(verbosity, _STDLIB_LEVELS)


def configure_logging(verbosity: int) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        level=level_for(verbosity),
        format="{time:HH:mm:ss.SSS} {level: <7} {message}",
        colorize=False,
    )
    logging.basicConfig(
        handlers=[InterceptHandler()], level=stdlib_level_for(verbosity), force=True
    )
