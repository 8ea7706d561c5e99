"""Package logger.

Every module logs through ``from .log import logger`` so a single handler
configuration covers the whole package.
"""

from __future__ import annotations

import logging

from .constants import APP_NAME

logger = logging.getLogger(APP_NAME)

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def configure_logging(level: str = "warning") -> None:
    """Attach a stderr handler to the package logger at *level*."""
    logger.setLevel(LOG_LEVELS.get(level.lower(), logging.WARNING))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(handler)
