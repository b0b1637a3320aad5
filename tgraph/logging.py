"""Centralized logging configuration for tgraph.

All modules obtain loggers through :func:`get_logger` so that output flows
through a single ``tgraph`` package logger. The initial level can be set with
the ``TGRAPH_LOG_LEVEL`` environment variable (name or number).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "tgraph"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LEVEL_ENV_VAR = "TGRAPH_LOG_LEVEL"

_ROOT_LOGGER_CONFIGURED = False


def parse_level(level: Union[int, str, None], default: int = logging.INFO) -> int:
    """Convert a level name or number into a ``logging`` level.

    Args:
        level: ``logging.DEBUG``, ``"debug"``, ``"10"`` or None.
        default: Level returned when ``level`` is None, empty or unknown.

    Returns:
        Integer logging level.
    """
    if level is None:
        return default
    if isinstance(level, int):
        return level
    text = level.strip()
    if not text:
        return default
    if text.isdigit():
        return int(text)
    resolved = logging.getLevelName(text.upper())
    return resolved if isinstance(resolved, int) else default


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the package logger.

    Subsequent calls are no-ops until :func:`reset_logging` is called.

    Args:
        level: Logging level; defaults to ``TGRAPH_LOG_LEVEL`` or INFO.
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stdout StreamHandler).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    if level is None:
        level = parse_level(os.environ.get(LEVEL_ENV_VAR))

    root_logger = logging.getLogger(PACKAGE_LOGGER)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a child logger of the package logger.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.

    Returns:
        Logger inheriting handlers and level from ``tgraph``.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: Union[int, str]) -> None:
    """Set the level of the package logger and its handlers.

    Args:
        level: Level number or name (e.g. ``logging.DEBUG`` or ``"warning"``).
    """
    setup_root_logger()
    resolved = parse_level(level)
    root_logger = logging.getLogger(PACKAGE_LOGGER)
    root_logger.setLevel(resolved)
    for handler in root_logger.handlers:
        handler.setLevel(resolved)


def enable_debug_logging() -> None:
    """Enable debug logging for the entire package."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return the package logger to INFO."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop handlers and configuration (mainly for testing)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(PACKAGE_LOGGER)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
