"""Environment-based configuration using pydantic-settings.

Provides validated retry defaults from environment variables. Settings are
never applied implicitly: a retry session only sees them when the caller
opts in via CallArgs.from_settings().

Example:
    >>> from retrykit.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.retry.attempts
    3
    >>> settings.logging.notify_level
    'WARNING'

    # Or with environment variables:
    # RETRYKIT_RETRY_ATTEMPTS=unlimited
    # RETRYKIT_RETRY_DELAY_SECONDS=0.5
    # RETRYKIT_LOG_NOTIFY_LEVEL=INFO
"""

from __future__ import annotations

import math
from datetime import timedelta
from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, NonNegativeFloat, PositiveFloat, PositiveInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from retrykit.foundation.types import Unlimited


class RetrySettings(BaseSettings):
    """Default retry session parameters."""

    model_config = SettingsConfigDict(
        env_prefix="RETRYKIT_RETRY_",
        extra="ignore",
    )

    attempts: PositiveInt | Unlimited = Field(default=3, description="Attempt budget or 'unlimited'")
    delay_seconds: NonNegativeFloat = Field(default=1.0, description="Base delay in seconds")
    backoff_factor: Annotated[float, Field(ge=1.0)] = 1.0
    max_delay_seconds: PositiveFloat | None = Field(default=None, description="Delay ceiling in seconds")

    @field_validator("backoff_factor")
    @classmethod
    def _finite_factor(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("backoff_factor must be finite")
        return v

    @property
    def delay(self) -> timedelta:
        return timedelta(seconds=self.delay_seconds)

    @property
    def max_delay(self) -> timedelta | None:
        return None if self.max_delay_seconds is None else timedelta(seconds=self.max_delay_seconds)


class LoggingSettings(BaseSettings):
    """Logging configuration for the bundled notify hooks."""

    model_config = SettingsConfigDict(
        env_prefix="RETRYKIT_LOG_",
        extra="ignore",
    )

    notify_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("notify_level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        """Accept level names in any case."""
        return v.upper() if isinstance(v, str) else v


class RetrykitSettings(BaseSettings):
    """Root settings for retrykit.

    Loads configuration from environment variables with RETRYKIT_ prefix.
    Supports nested configuration and .env files.

    Example environment variables:
        RETRYKIT_RETRY_ATTEMPTS=5
        RETRYKIT_RETRY_BACKOFF_FACTOR=2
        RETRYKIT_RETRY_MAX_DELAY_SECONDS=30
        RETRYKIT_LOG_NOTIFY_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="RETRYKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    retry: RetrySettings = Field(default_factory=RetrySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> RetrykitSettings:
    """Get the global settings instance (cached)."""
    return RetrykitSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
