"""Centralized logging configuration for graphkit.

Every module logs through a child of the ``graphkit`` logger obtained from
:func:`get_logger`. The root is configured once, on import, with a stdout
handler. Its initial level comes from the ``GRAPHKIT_LOG_LEVEL`` environment
variable when that names a standard level, INFO otherwise.

Example:
    >>> from graphkit.algorithms import kahn_order
    >>> from graphkit.logging import debug_logging
    >>> with debug_logging():
    ...     kahn_order([[1, 2], [3], [3], []])  # DEBUG records emitted here
    [0, 1, 2, 3]
"""

import logging
import os
import sys
from contextlib import contextmanager
from typing import Generator, Optional

ROOT_LOGGER_NAME = "graphkit"
LOG_LEVEL_ENV = "GRAPHKIT_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_ROOT_LOGGER_CONFIGURED = False


def level_from_env(default: int = logging.INFO) -> int:
    """Return the level named by ``GRAPHKIT_LOG_LEVEL``, or ``default``."""
    env_level = os.getenv(LOG_LEVEL_ENV)
    if not env_level:
        return default
    value = getattr(logging, env_level.strip().upper(), None)
    return value if isinstance(value, int) else default


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``graphkit`` logger.

    Subsequent calls are no-ops until :func:`reset_logging` is called.

    Args:
        level: Logging level (default: from ``GRAPHKIT_LOG_LEVEL``, else INFO).
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to StreamHandler on stdout).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level_from_env() if level is None else level)
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Records still reach the Python root logger, so pytest's caplog sees them
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger that takes its level from the ``graphkit`` root.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``graphkit`` root logger and its handlers."""
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


@contextmanager
def debug_logging() -> Generator[None, None, None]:
    """Emit DEBUG records inside the block, then restore the previous level."""
    setup_root_logger()
    previous = logging.getLogger(ROOT_LOGGER_NAME).level
    enable_debug_logging()
    try:
        yield
    finally:
        set_global_log_level(previous)


def reset_logging() -> None:
    """Drop the graphkit handler and level (mainly for testing)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
