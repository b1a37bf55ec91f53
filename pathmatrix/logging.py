"""Logging setup shared by every pathmatrix module.

Modules obtain loggers with ``get_logger(__name__)``. All of them are children
of the ``pathmatrix`` logger, which owns the only handler; verbosity is changed
in one place with `set_global_log_level`.
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "pathmatrix"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def _package_logger() -> logging.Logger:
    return logging.getLogger(PACKAGE_LOGGER_NAME)


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Give the ``pathmatrix`` logger its handler, once.

    Later calls do nothing until `reset_logging` runs, so importing modules in
    any order leaves a single handler in place.

    Args:
        level: Level for the package logger.
        format_string: Record format; defaults to ``DEFAULT_FORMAT``.
        handler: Destination; defaults to a stdout stream handler.
    """
    global _configured
    if _configured:
        return

    package_logger = _package_logger()
    package_logger.handlers.clear()
    package_logger.setLevel(level)

    handler = handler or logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)
    # Records still reach the root logger (pytest's caplog listens there).
    package_logger.propagate = True
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, configuring the package logger if needed.

    The returned logger has no level of its own, so `set_global_log_level`
    governs it.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Apply ``level`` to the package logger and its handlers."""
    setup_root_logger()
    package_logger = _package_logger()
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Remove the package handler so `setup_root_logger` can run again."""
    global _configured
    _configured = False
    package_logger = _package_logger()
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
