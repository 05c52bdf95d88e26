"""Mini README: Tests for the logging helpers.

Checks level resolution from names, numbers and the environment, and that
repeated configuration keeps a single handler on the root logger.
"""

from __future__ import annotations

import logging

import pytest

from pocketledger.logging_utils import LOG_LEVEL_ENV, configure_root_logger, get_logger, parse_level


def test_parse_level_accepts_names_numbers_and_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    assert parse_level() == logging.INFO
    assert parse_level("debug") == logging.DEBUG
    assert parse_level(" 30 ") == logging.WARNING
    assert parse_level(logging.ERROR) == logging.ERROR

    monkeypatch.setenv(LOG_LEVEL_ENV, "warning")
    assert parse_level() == logging.WARNING

    with pytest.raises(ValueError):
        parse_level("chatty")


def test_reconfiguring_adjusts_level_without_stacking_handlers() -> None:
    root_logger = logging.getLogger()
    original_level = root_logger.level
    get_logger(__name__)
    handler_count = len(root_logger.handlers)
    try:
        configure_root_logger("DEBUG")
        configure_root_logger(logging.WARNING)

        assert root_logger.level == logging.WARNING
        assert len(root_logger.handlers) == handler_count
    finally:
        root_logger.setLevel(original_level)
