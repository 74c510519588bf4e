"""Shared fixtures for retrykit tests."""

from __future__ import annotations

import pytest

from retrykit.foundation.config import clear_settings_cache
from retrykit.foundation.testing import FakeClock


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture(autouse=True)
def clean_settings() -> object:
    """Reset cached settings before and after each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()
