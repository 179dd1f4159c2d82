"""Logging setup shared by every pathfind module.

All package loggers hang off a single ``"pathfind"`` logger that owns exactly
one handler. Modules call ``get_logger(__name__)`` and never attach handlers of
their own. The initial level can be overridden with the ``PATHFIND_LOG_LEVEL``
environment variable (e.g. ``PATHFIND_LOG_LEVEL=debug``).
"""

import logging
import os
import sys
from typing import Optional

ROOT_LOGGER_NAME = "pathfind"
LOG_LEVEL_ENV = "PATHFIND_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def _level_from_env(default: int) -> int:
    env_level = os.getenv(LOG_LEVEL_ENV)
    if not env_level:
        return default
    level = logging.getLevelName(env_level.strip().upper())
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else default


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the single package handler to the ``pathfind`` logger.

    Only the first call has an effect; later calls are ignored until
    ``reset_logging()`` is used.

    Args:
        level: Logging level used when ``PATHFIND_LOG_LEVEL`` is not set.
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stdout StreamHandler).
    """
    global _configured

    if _configured:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(_level_from_env(level))
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Keep propagation so pytest's caplog sees package records
    root_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a package logger that inherits the ``pathfind`` configuration.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.

    Returns:
        Logger with level NOTSET so the root package level applies.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the package logger and its handlers.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO).
    """
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Switch the package to DEBUG, which exposes search progress records."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return the package to INFO."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the package handler and forget the setup (used by tests)."""
    global _configured
    _configured = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
