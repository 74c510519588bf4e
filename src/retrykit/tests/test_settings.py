"""Tests for environment-based settings."""

from __future__ import annotations

from datetime import timedelta

import pytest
from pydantic import ValidationError

from retrykit import UNLIMITED_ATTEMPTS, get_settings
from retrykit.foundation.config import LoggingSettings, RetrySettings, clear_settings_cache


def test_defaults() -> None:
    settings = get_settings()
    assert settings.retry.attempts == 3
    assert settings.retry.delay == timedelta(seconds=1)
    assert settings.retry.backoff_factor == 1.0
    assert settings.retry.max_delay is None
    assert settings.logging.notify_level == "WARNING"


def test_retry_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RETRYKIT_RETRY_ATTEMPTS", "unlimited")
    monkeypatch.setenv("RETRYKIT_RETRY_BACKOFF_FACTOR", "2")
    monkeypatch.setenv("RETRYKIT_RETRY_MAX_DELAY_SECONDS", "30")
    retry = get_settings().retry
    assert retry.attempts is UNLIMITED_ATTEMPTS
    assert retry.backoff_factor == 2.0
    assert retry.max_delay == timedelta(seconds=30)


def test_notify_level_is_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RETRYKIT_LOG_NOTIFY_LEVEL", "info")
    assert get_settings().logging.notify_level == "INFO"


def test_unknown_level_rejected() -> None:
    with pytest.raises(ValidationError):
        LoggingSettings(notify_level="CHATTY")


@pytest.mark.parametrize("factor", ["0.5", "inf", "nan"])
def test_invalid_backoff_factor(monkeypatch: pytest.MonkeyPatch, factor: str) -> None:
    monkeypatch.setenv("RETRYKIT_RETRY_BACKOFF_FACTOR", factor)
    with pytest.raises(ValidationError):
        RetrySettings()


@pytest.mark.parametrize("attempts", ["0", "-1", "lots"])
def test_invalid_attempts(monkeypatch: pytest.MonkeyPatch, attempts: str) -> None:
    monkeypatch.setenv("RETRYKIT_RETRY_ATTEMPTS", attempts)
    with pytest.raises(ValidationError):
        RetrySettings()


def test_settings_are_cached_until_cleared(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    monkeypatch.setenv("RETRYKIT_RETRY_ATTEMPTS", "9")
    assert get_settings() is first

    clear_settings_cache()
    assert get_settings().retry.attempts == 9
