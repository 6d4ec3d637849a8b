"""Logging setup for the command line entry point.

Library modules only create loggers under the ``riprocess`` namespace; the
handlers are attached here. Everything goes to stderr so that stdout carries
nothing but the image list.
"""
from __future__ import annotations

import logging
import sys
import time
from datetime import datetime, timezone
from logging import Logger
from typing import Optional

__all__ = ["UtcFormatter", "configure_logging", "ROOT_LOGGER_NAME"]


ROOT_LOGGER_NAME = "riprocess"


class UtcFormatter(logging.Formatter):
    """Formatter that renders timestamps in UTC using ISO-8601."""

    converter = time.gmtime

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        if datefmt:
            return dt.strftime(datefmt)
        return dt.isoformat(timespec="seconds")


def configure_logging(level: int = logging.WARNING) -> Logger:
    """Configure the package logger with a single stderr handler.

    Calling it again replaces the previous handler instead of adding a second
    one.

    Args:
        level: Logging level (default: WARNING).

    Returns:
        The configured ``riprocess`` logger.
    """
    formatter = UtcFormatter(
        fmt="%(asctime)sZ %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    root_logger.debug("Logging configured at level %s", logging.getLevelName(level))
    return root_logger

