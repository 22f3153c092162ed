"""Centralized logging configuration for netalgo.

All modules obtain loggers through :func:`get_logger`; they inherit level and
handler from the single ``netalgo`` root logger configured here.
"""

import logging
import sys
from typing import Optional

from netalgo.config import ALGORITHM_CONFIG

ROOT_LOGGER_NAME = "netalgo"

_ROOT_LOGGER_CONFIGURED = False


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach one handler to the ``netalgo`` logger.

    Calls after the first are no-ops until :func:`reset_logging` runs.

    Args:
        level: Logging level; defaults to ``ALGORITHM_CONFIG.log_level``.
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stdout StreamHandler).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(ALGORITHM_CONFIG.log_level if level is None else level)
    root_logger.handlers.clear()

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)

    handler.setFormatter(logging.Formatter(format_string))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a child logger of ``netalgo``.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.

    Returns:
        Logger that inherits level and handler from the root ``netalgo`` logger.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the log level for every netalgo logger.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO).
    """
    setup_root_logger()
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Enable debug logging for the entire package."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Leave debug logging and return to the configured level.

    ``ALGORITHM_CONFIG.log_level`` is restored unless it is DEBUG or lower,
    in which case INFO is used.
    """
    set_global_log_level(max(ALGORITHM_CONFIG.log_level, logging.INFO))


def reset_logging() -> None:
    """Drop the netalgo handler so the next call reconfigures (mainly for tests)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
