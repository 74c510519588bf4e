"""Foundation layer: error model, configuration, shared types, test doubles."""

from .config import LoggingSettings, RetrykitSettings, RetrySettings, clear_settings_cache, get_settings
from .errors import (
    AttemptsExceeded,
    InvalidConfiguration,
    RetryError,
    RetryStopped,
    is_attempts_exceeded,
    is_invalid_configuration,
    is_retry_stopped,
    retry_cause,
)
from .types import UNLIMITED_ATTEMPTS, Attempts, FatalClassifier, NotifyFunc, Unlimited

__all__ = [
    # Config
    "LoggingSettings", "RetrySettings", "RetrykitSettings", "get_settings", "clear_settings_cache",
    # Errors
    "RetryError", "InvalidConfiguration", "AttemptsExceeded", "RetryStopped",
    "is_attempts_exceeded", "is_retry_stopped", "is_invalid_configuration", "retry_cause",
    # Types
    "Unlimited", "UNLIMITED_ATTEMPTS", "Attempts", "FatalClassifier", "NotifyFunc",
]
