from __future__ import annotations

import logging

import pytest

from infores.logger import ROOT_LOGGER, configure, get_logger, reset


def test_get_logger_attaches_one_handler() -> None:
    first = get_logger()
    second = get_logger()
    assert first is second
    assert len(first.handlers) == 1
    assert first.level == logging.WARNING


def test_configure_replaces_handler_and_sets_level() -> None:
    get_logger()
    logger = configure("debug")
    assert logger.name == ROOT_LOGGER
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_configure_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="unknown log level"):
        configure("chatty")


def test_reset_detaches_handlers() -> None:
    configure("INFO")
    reset()
    assert logging.getLogger(ROOT_LOGGER).handlers == []
