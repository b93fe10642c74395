"""Tests for composer settings."""

import pytest
from pydantic import ValidationError

from updatelift.config import ComposerSettings, get_settings


def test_defaults(monkeypatch):
    for name in ("UPDATELIFT_TRACE_UPDATES", "UPDATELIFT_LOG_LEVEL", "UPDATELIFT_LOG_EFFECT_ITEMS"):
        monkeypatch.delenv(name, raising=False)

    settings = ComposerSettings()

    assert settings.trace_updates is False
    assert settings.log_level == "WARNING"
    assert settings.log_effect_items is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("UPDATELIFT_TRACE_UPDATES", "true")
    monkeypatch.setenv("UPDATELIFT_LOG_LEVEL", "debug")

    settings = ComposerSettings()

    assert settings.trace_updates is True
    assert settings.log_level == "DEBUG"


def test_explicit_values_win(monkeypatch):
    monkeypatch.setenv("UPDATELIFT_TRACE_UPDATES", "true")

    assert ComposerSettings(trace_updates=False).trace_updates is False


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError, match="Unknown log level"):
        ComposerSettings(log_level="CHATTY")


def test_get_settings_is_cached(fresh_settings, monkeypatch):
    monkeypatch.setenv("UPDATELIFT_LOG_LEVEL", "INFO")

    first = get_settings()
    monkeypatch.setenv("UPDATELIFT_LOG_LEVEL", "ERROR")

    assert get_settings() is first
    assert first.log_level == "INFO"

    get_settings.cache_clear()

    assert get_settings().log_level == "ERROR"
