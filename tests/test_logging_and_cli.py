import logging

import pytest

from backend.logging_utils import LOGGER_NAME, configure_logging, get_logger
from main import parse_args


def test_configure_logging_is_idempotent():
    first = configure_logging("info")
    second = configure_logging(logging.DEBUG)
    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.DEBUG


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        configure_logging("chatty")


def test_module_loggers_live_under_application_logger():
    assert get_logger("backend.engine").name == f"{LOGGER_NAME}.backend.engine"


def test_log_level_defaults(monkeypatch):
    monkeypatch.delenv("CALCULATOR_LOG_LEVEL", raising=False)
    assert parse_args([]).log_level == "WARNING"


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("CALCULATOR_LOG_LEVEL", "DEBUG")
    assert parse_args([]).log_level == "DEBUG"
    assert parse_args(["--log-level", "ERROR"]).log_level == "ERROR"
