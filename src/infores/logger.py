"""Logging setup for the command line.

Library modules only call ``logging.getLogger(__name__)``; handlers are
attached here, by the CLI, and nowhere else.
"""

from __future__ import annotations

import logging
import sys

_FMT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
ROOT_LOGGER: str = "infores"


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Return a logger with a single stderr handler in a consistent format."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FMT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(logging.WARNING)
    return logger


def reset(name: str = ROOT_LOGGER) -> None:
    """Detach and close every handler previously attached by :func:`get_logger`."""
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def configure(level: str) -> logging.Logger:
    """Bind a fresh stderr handler at ``level`` (``DEBUG``, ``INFO``, ...)."""
    numeric: object = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"unknown log level: {level}")
    reset(ROOT_LOGGER)
    logger = get_logger(ROOT_LOGGER)
    logger.setLevel(numeric)
    return logger
