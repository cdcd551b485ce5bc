# topmark:header:start
#
#   project      : LineScan
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for log level parsing and logger setup."""

from __future__ import annotations

import logging as std_logging

import pytest

from linescan.config import logging
from linescan.constants import LINESCAN_LOG_LEVEL_ENV
from tests.conftest import mark_config, parametrize


@mark_config
@parametrize(
    "value, expected",
    [
        ("TRACE", logging.TRACE_LEVEL),
        ("debug", std_logging.DEBUG),
        (" Info ", std_logging.INFO),
        ("WARN", std_logging.WARNING),
        ("10", 10),
        ("loud", None),
        ("", None),
    ],
)
def test_parse_log_level(value: str, expected: int | None) -> None:
    """Level names are case-insensitive; numeric strings pass through."""
    assert logging.parse_log_level(value) == expected


@mark_config
def test_resolve_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """The environment variable is honored only when set."""
    assert logging.resolve_env_log_level() is None
    monkeypatch.setenv(LINESCAN_LOG_LEVEL_ENV, "debug")
    assert logging.resolve_env_log_level() == std_logging.DEBUG


@mark_config
def test_setup_logging_installs_a_single_handler() -> None:
    """Repeated setup replaces the root handler instead of stacking them."""
    logging.setup_logging(level=std_logging.INFO)
    logging.setup_logging(level=std_logging.DEBUG)
    root = std_logging.getLogger()
    assert len(root.handlers) == 1
    assert root.level == std_logging.DEBUG
    assert isinstance(root.handlers[0].formatter, logging.ChalkFormatter)


@mark_config
def test_logger_has_trace() -> None:
    """Loggers expose a ``trace`` method below DEBUG."""
    logger = logging.get_logger("linescan.tests")
    assert logging.TRACE_LEVEL < std_logging.DEBUG
    logger.trace("trace message %d", 1)
