"""Retry loop with deterministic exponential backoff.

Re-invokes a fallible operation until success, a fatal error, attempt
budget exhaustion, or an external stop signal.

Example:
    >>> from retrykit.runtime.retry import call, scale_duration
    >>> call(
    ...     func=fetch,
    ...     attempts=5,
    ...     delay=timedelta(seconds=1),
    ...     backoff_factor=2,
    ...     max_delay=timedelta(seconds=10),
    ... )
    >>> scale_duration(timedelta(minutes=1), timedelta(minutes=3), 10)
    datetime.timedelta(seconds=180)
"""

from .backoff import backoff_delays, scale_duration
from .call import build_args, call, call_async
from .decorator import retrying
from .hooks import chain_notify, fatal_on, log_attempts
from .policy import CallArgs, RetryPolicy, validate_policy

__all__ = [
    # Backoff
    "scale_duration",
    "backoff_delays",
    # Policy
    "CallArgs",
    "RetryPolicy",
    "validate_policy",
    # Execution
    "call",
    "call_async",
    "build_args",
    "retrying",
    # Hooks
    "log_attempts",
    "chain_notify",
    "fatal_on",
]
