"""Opt-in logging helpers.

The library is silent by default (NullHandler on the package logger).

Environment variables:
    MCP_NUMERICS_LOGGING: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
"""

from __future__ import annotations

import logging
import os
from typing import Literal

__all__ = ["configure_from_env", "enable_console_logging", "set_level"]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOGGER_NAME = "mcp_numerics"
ENV_LEVEL = "MCP_NUMERICS_LOGGING"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _get_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def enable_console_logging(
    level: LogLevel | int = "INFO",
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> logging.StreamHandler:
    """Attach a stderr handler to the package logger and return it."""
    logger = _get_logger()
    logger.setLevel(_get_level(level))

    handler = logging.StreamHandler()
    handler.setLevel(_get_level(level))
    handler.setFormatter(logging.Formatter(format, date_format))

    logger.addHandler(handler)
    return handler


def set_level(level: LogLevel | int) -> None:
    _get_logger().setLevel(_get_level(level))


def configure_from_env() -> logging.StreamHandler | None:
    """Enable console logging when MCP_NUMERICS_LOGGING is set; otherwise do nothing."""
    level = os.environ.get(ENV_LEVEL, "").upper()
    if not level:
        return None
    return enable_console_logging(level=level)
