from __future__ import annotations

import logging

import pytest
import structlog
from embedkv.core import config
from embedkv.core import logging as kvlog


@pytest.fixture
def fresh_settings():
    config.load_settings.cache_clear()
    yield
    config.load_settings.cache_clear()


def test_settings_defaults(fresh_settings, monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("EMBEDKV_LOG_LEVEL", "EMBEDKV_LOG_FORMAT", "EMBEDKV_UNKNOWN_OPTIONS"):
        monkeypatch.delenv(var, raising=False)
    s = config.load_settings()
    assert s.log_level == "INFO"
    assert s.log_format == "console"
    assert s.unknown_options == "reject"
    assert config.load_settings() is s


def test_settings_from_env(fresh_settings, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EMBEDKV_UNKNOWN_OPTIONS", "ignore")
    monkeypatch.setenv("EMBEDKV_LOG_FORMAT", "json")
    s = config.load_settings()
    assert s.unknown_options == "ignore"
    assert s.log_format == "json"


def test_configure_logging_is_idempotent(monkeypatch: pytest.MonkeyPatch) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    monkeypatch.setattr(kvlog, "_CONFIGURED", False)
    try:
        kvlog.configure_logging(level="debug", fmt="json")
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG

        kvlog.configure_logging(level="error", fmt="console")
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG

        log = kvlog.get_logger("embedkv.test").bind(path="/tmp/x")
        assert isinstance(log, kvlog.ILogger)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
        structlog.reset_defaults()
