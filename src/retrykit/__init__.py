"""retrykit - Deterministic retry-with-backoff for fallible operations.

Runs an operation until it succeeds, raises a fatal error, exhausts its
attempt budget, or an external stop signal is asserted. Delays grow by a
fixed factor up to an optional ceiling; there is no jitter, so every
schedule is reproducible and testable without real waits.

Quick Start:
    >>> from datetime import timedelta
    >>> from retrykit import call, is_attempts_exceeded
    >>>
    >>> try:
    ...     data = call(
    ...         func=fetch,
    ...         attempts=5,
    ...         delay=timedelta(seconds=1),
    ...         backoff_factor=2,
    ...         max_delay=timedelta(seconds=30),
    ...     )
    ... except Exception as e:
    ...     if is_attempts_exceeded(e):
    ...         ...

Decorator:
    >>> from retrykit import retrying, UNLIMITED_ATTEMPTS
    >>>
    >>> @retrying(attempts=UNLIMITED_ATTEMPTS, delay=0.5, stop=token)
    ... async def poll() -> str:
    ...     return await client.status()

Testing without waits:
    >>> from retrykit.foundation.testing import FakeClock
    >>> clock = FakeClock()
    >>> call(func=flaky, attempts=3, delay=timedelta(minutes=1), clock=clock)
    >>> clock.delays
    [datetime.timedelta(seconds=60)]
"""

from __future__ import annotations

__version__ = "0.1.0"

# Errors
from .foundation.errors import (
    AttemptsExceeded,
    InvalidConfiguration,
    RetryError,
    RetryStopped,
    is_attempts_exceeded,
    is_invalid_configuration,
    is_retry_stopped,
    retry_cause,
)

# Types
from .foundation.types import UNLIMITED_ATTEMPTS, Unlimited

# Settings
from .foundation.config import RetrykitSettings, get_settings

# Clock & cancellation
from .runtime.cancel import CancelToken, StopSignal
from .runtime.clock import WALL_CLOCK, Clock, Timer, WallClock

# Retry
from .runtime.retry import (
    CallArgs,
    RetryPolicy,
    backoff_delays,
    call,
    call_async,
    chain_notify,
    fatal_on,
    log_attempts,
    retrying,
    scale_duration,
    validate_policy,
)

__all__ = [
    "__version__",
    # Errors
    "RetryError",
    "InvalidConfiguration",
    "AttemptsExceeded",
    "RetryStopped",
    "is_attempts_exceeded",
    "is_retry_stopped",
    "is_invalid_configuration",
    "retry_cause",
    # Types
    "Unlimited",
    "UNLIMITED_ATTEMPTS",
    # Settings
    "RetrykitSettings",
    "get_settings",
    # Clock & cancellation
    "Clock",
    "Timer",
    "WallClock",
    "WALL_CLOCK",
    "StopSignal",
    "CancelToken",
    # Retry
    "CallArgs",
    "RetryPolicy",
    "validate_policy",
    "call",
    "call_async",
    "retrying",
    "scale_duration",
    "backoff_delays",
    "log_attempts",
    "chain_notify",
    "fatal_on",
]
