"""Tests for centralized logging behavior and configuration."""

import logging
from io import StringIO

import pytest

from pathfind.logging import (
    LOG_LEVEL_ENV,
    ROOT_LOGGER_NAME,
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _reset_logging_each_test(monkeypatch):
    """Reset logging state before and after each test to avoid cross-test bleed."""
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    reset_logging()
    yield
    reset_logging()


def test_effective_levels_enable_disable():
    """INFO by default, DEBUG after enable, back to INFO after disable."""
    logger = get_logger("pathfind.test")

    capture = StringIO()
    handler = logging.StreamHandler(capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    logger.info("info-1")
    assert "info-1" in capture.getvalue()

    logger.debug("debug-1")
    assert "debug-1" not in capture.getvalue()

    enable_debug_logging()
    logger.debug("debug-2")
    assert "debug-2" in capture.getvalue()

    disable_debug_logging()
    logger.debug("debug-3")
    assert "debug-3" not in capture.getvalue()

    logger.removeHandler(handler)


def test_global_level_propagates_to_children_and_new_loggers():
    search_logger = get_logger("pathfind.search")
    queries_logger = get_logger("pathfind.queries")
    assert search_logger.getEffectiveLevel() == logging.INFO
    assert queries_logger.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert search_logger.getEffectiveLevel() == logging.WARNING
    assert get_logger("pathfind.lib.nx").getEffectiveLevel() == logging.WARNING


def test_setup_root_logger_idempotent_no_duplicate_handlers():
    handler = logging.StreamHandler(StringIO())
    setup_root_logger(level=logging.INFO, handler=handler)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    assert root_logger.handlers == [handler]

    setup_root_logger(level=logging.DEBUG)
    assert root_logger.handlers == [handler]
    assert root_logger.level == logging.INFO


def test_custom_format_string_applied():
    capture = StringIO()
    handler = logging.StreamHandler(capture)
    fmt = "LEVEL:%(levelname)s|NAME:%(name)s|MSG:%(message)s"
    setup_root_logger(level=logging.INFO, format_string=fmt, handler=handler)

    get_logger("pathfind.test.format").info("hello")
    out = capture.getvalue()
    assert "LEVEL:INFO" in out
    assert "NAME:pathfind.test.format" in out
    assert "MSG:hello" in out


def test_env_variable_sets_initial_level(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    setup_root_logger(handler=logging.StreamHandler(StringIO()))
    assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.DEBUG


def test_unknown_env_level_falls_back(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
    setup_root_logger(level=logging.WARNING, handler=logging.StreamHandler(StringIO()))
    assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.WARNING


def test_reset_logging_clears_handlers():
    setup_root_logger(handler=logging.StreamHandler(StringIO()))
    reset_logging()
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    assert root_logger.handlers == []
    assert root_logger.level == logging.NOTSET
