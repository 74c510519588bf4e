"""The retry loop.

Invokes an operation until it succeeds, raises a fatal error, exhausts the
attempt budget, or observes the stop signal. Delays are inserted only
between attempts and grow by backoff_factor, clamped to max_delay.

Per attempt:
    1. Invoke func; return its value on success
    2. Fatal error -> re-raise it unchanged (no notify, no delay)
    3. notify_func(error, attempt)
    4. Budget exhausted -> AttemptsExceeded(error)
    5. Stop asserted -> RetryStopped(error)
    6. Wait clock.after(delay), scale delay, next attempt

The stop signal never prevents the first attempt and never interrupts one
in flight; it only suppresses further attempts.

Example:
    >>> call(func=fetch, attempts=5, delay=timedelta(seconds=1), backoff_factor=2)
    >>> # Or with a prepared CallArgs:
    >>> await call_async(CallArgs(func=fetch_async, attempts=UNLIMITED_ATTEMPTS, delay=0.5, stop=token))
"""

from __future__ import annotations

import inspect
from typing import Any

from pydantic import ValidationError

from retrykit.foundation.errors import InvalidConfiguration

from .backoff import scale_duration
from .policy import CallArgs, RetryPolicy, validate_policy


def build_args(**kwargs: Any) -> CallArgs:
    """Construct CallArgs, reporting type errors as InvalidConfiguration."""
    try:
        return CallArgs(**kwargs)
    except ValidationError as e:
        raise InvalidConfiguration.from_validation_error(e) from e


def _resolve(args: CallArgs | None, kwargs: dict[str, Any]) -> RetryPolicy:
    if args is not None and kwargs:
        raise TypeError("pass either a CallArgs instance or keyword arguments, not both")
    return validate_policy(args if args is not None else build_args(**kwargs))


def call(args: CallArgs | None = None, /, **kwargs: Any) -> Any:
    """Run func under the retry policy, blocking the calling thread.

    Args:
        args: Prepared CallArgs; alternatively pass the fields as keywords

    Returns:
        Whatever func returned on its first successful attempt

    Raises:
        InvalidConfiguration: Arguments rejected; func never invoked
        AttemptsExceeded: Every permitted attempt failed
        RetryStopped: Stop signal observed between attempts
        Exception: func's own exception when classified fatal
    """
    policy = _resolve(args, kwargs)
    delay = policy.delay
    attempt = 1

    while True:
        try:
            return policy.func()
        except Exception as e:
            if policy.is_fatal(e):
                raise
            if (terminal := policy.settle(e, attempt)) is not None:
                raise terminal from e

        policy.clock.after(delay).wait()
        delay = scale_duration(delay, policy.max_delay, policy.backoff_factor)
        attempt += 1


async def call_async(args: CallArgs | None = None, /, **kwargs: Any) -> Any:
    """Async version of call(): awaits func and the inter-attempt delay.

    func must return an awaitable; anything else raises TypeError without
    being retried. Cancelling the surrounding task propagates immediately;
    asyncio.CancelledError is never retried.
    """
    policy = _resolve(args, kwargs)
    delay = policy.delay
    attempt = 1

    while True:
        try:
            pending = policy.func()
            if inspect.isawaitable(pending):
                return await pending
        except Exception as e:
            if policy.is_fatal(e):
                raise
            if (terminal := policy.settle(e, attempt)) is not None:
                raise terminal from e
        else:
            raise TypeError(f"func must return an awaitable, got {type(pending).__name__}")

        await policy.clock.after(delay)
        delay = scale_duration(delay, policy.max_delay, policy.backoff_factor)
        attempt += 1
