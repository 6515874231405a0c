"""Centralized logging configuration for flownet.

Every module logs through ``get_logger(__name__)`` under the ``flownet``
logger. The solver only emits DEBUG records, so nothing is printed unless
``enable_debug_logging()`` is called.
"""

import logging
import sys
from typing import Optional

from flownet.config import MAX_FLOW_CONFIG

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_ROOT_LOGGER_NAME = "flownet"

# Set once the flownet logger has its handler
_ROOT_LOGGER_CONFIGURED = False


def setup_root_logger(
    level: int = logging.INFO,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``flownet`` logger.

    Repeated calls are no-ops until ``reset_logging()`` is called.

    Args:
        level: Logging level (default: INFO).
        handler: Destination for records; defaults to a stdout StreamHandler.
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    if handler.formatter is None:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees solver records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger inheriting the ``flownet`` level and handler.

    Args:
        name: Logger name (typically ``__name__`` from calling module).
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the log level for all flownet loggers."""
    setup_root_logger()

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging(augmentations: bool = False) -> None:
    """Show solver DEBUG output.

    Args:
        augmentations: Also log every augmenting path through
            ``MAX_FLOW_CONFIG.log_augmentations``, not just per-solve totals.
    """
    set_global_log_level(logging.DEBUG)
    if augmentations:
        MAX_FLOW_CONFIG.log_augmentations = True


def disable_debug_logging() -> None:
    """Return to INFO and stop per-augmentation records."""
    set_global_log_level(logging.INFO)
    MAX_FLOW_CONFIG.log_augmentations = False


def reset_logging() -> None:
    """Reset logging configuration (mainly for testing)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
