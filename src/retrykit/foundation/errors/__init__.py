"""Error model for retry sessions.

- RetryError: Base for errors raised by the loop
- InvalidConfiguration: Arguments rejected before any attempt
- AttemptsExceeded / RetryStopped: Terminal outcomes carrying last_error
- Predicates: Chain-aware classification without string matching
"""

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

__all__ = [
    # Exceptions
    "RetryError", "InvalidConfiguration", "AttemptsExceeded", "RetryStopped",
    # Predicates
    "is_attempts_exceeded", "is_retry_stopped", "is_invalid_configuration", "retry_cause",
]
