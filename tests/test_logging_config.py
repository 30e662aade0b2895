from __future__ import annotations

import logging

import pytest

from client_registry_api.app.core.logging_config import NOISY_LOGGERS, setup_logging


@pytest.fixture(autouse=True)
def _restore_noisy_levels():
    saved = {name: logging.getLogger(name).level for name in NOISY_LOGGERS}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


def test_access_and_httpx_loggers_quiet_at_info() -> None:
    setup_logging("info")
    for name in NOISY_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING


def test_noisy_loggers_follow_debug() -> None:
    setup_logging("DEBUG")
    for name in NOISY_LOGGERS:
        assert logging.getLogger(name).level == logging.DEBUG


def test_error_level_is_not_lowered() -> None:
    setup_logging("ERROR")
    assert logging.getLogger("httpx").level == logging.ERROR


def test_unknown_level_falls_back_to_info() -> None:
    setup_logging("chatty")
    assert logging.getLogger("uvicorn.access").level == logging.WARNING
