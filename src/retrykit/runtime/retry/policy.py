"""Retry session configuration and validation.

Two models split raw input from the resolved policy:
    - CallArgs: what the caller supplies; every field optional, mutable
    - RetryPolicy: validated, defaulted, frozen; consumed read-only by the loop

validate_policy() (or CallArgs.resolve()) converts one into the other without
touching the CallArgs instance, so reusing a CallArgs never leaks defaults.

Checks run in priority order; the first failing check wins:
    1. func present
    2. attempts present (positive int or UNLIMITED_ATTEMPTS)
    3. delay present and non-negative
    4. backoff_factor finite and >= 1 (default 1.0, i.e. linear)
    5. max_delay non-negative (None/zero = unbounded)
    6. clock defaults to WALL_CLOCK

Example:
    >>> args = CallArgs(func=fetch, attempts=5, delay=timedelta(seconds=1), backoff_factor=2)
    >>> policy = args.resolve()
    >>> policy.clock is WALL_CLOCK
    True
    >>> CallArgs(func=fetch, delay=1.0).resolve()
    Traceback (most recent call last):
    InvalidConfiguration: missing attempts not valid
"""

from __future__ import annotations

import math
from datetime import timedelta
from typing import TYPE_CHECKING, Annotated, Any, Callable, Self

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

from retrykit.foundation.errors import AttemptsExceeded, InvalidConfiguration, RetryError, RetryStopped
from retrykit.foundation.types import Unlimited
from retrykit.runtime.cancel import StopSignal
from retrykit.runtime.clock import WALL_CLOCK, Clock

if TYPE_CHECKING:
    from retrykit.foundation.config import RetrykitSettings


class CallArgs(BaseModel):
    """Raw arguments for one retry session.

    Every field is optional here; presence is enforced by validate_policy()
    so that missing values surface as InvalidConfiguration, not as pydantic
    errors. Field types are still checked on construction.

    Attributes:
        func: Operation to invoke; failure is signalled by raising
        attempts: Attempt budget, or UNLIMITED_ATTEMPTS
        delay: Delay before the second attempt (numbers are seconds)
        backoff_factor: Multiplier applied to the delay after each failure
        max_delay: Delay ceiling; None or zero means unbounded
        is_fatal_error: Returns True for errors that must not be retried
        notify_func: Called with (error, attempt) after each retryable failure
        stop: Stop signal polled between attempts
        clock: Time source; defaults to the wall clock
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,  # For Clock / StopSignal protocols
        extra="forbid",
        validate_assignment=True,
    )

    func: Callable[[], Any] | None = None
    attempts: int | Unlimited | None = None
    delay: timedelta | None = None
    backoff_factor: float | None = None
    max_delay: timedelta | None = None
    is_fatal_error: Callable[[Exception], bool] | None = Field(default=None, repr=False)
    notify_func: Callable[[Exception, int], None] | None = Field(default=None, repr=False)
    stop: StopSignal | None = Field(default=None, repr=False)
    clock: Clock | None = Field(default=None, repr=False)

    @classmethod
    def from_settings(
        cls,
        func: Callable[[], Any],
        settings: RetrykitSettings | None = None,
        **overrides: Any,
    ) -> Self:
        """Build args with attempts/delay/backoff taken from settings.

        Args:
            func: Operation to retry
            settings: Settings to read; defaults to get_settings()
            **overrides: Any CallArgs field, applied over the settings values
        """
        from retrykit.foundation.config import get_settings

        retry = (settings or get_settings()).retry
        values: dict[str, Any] = {
            "attempts": retry.attempts,
            "delay": retry.delay,
            "backoff_factor": retry.backoff_factor,
            "max_delay": retry.max_delay,
        }
        return cls(func=func, **{**values, **overrides})

    def resolve(self) -> RetryPolicy:
        """Validate and default into a frozen RetryPolicy."""
        return validate_policy(self)


class RetryPolicy(BaseModel):
    """Validated, fully defaulted configuration for one retry session.

    Frozen: the loop consumes it read-only and nothing can alter it
    mid-session. Exposes the per-attempt decisions the loop makes so the
    sync and async loops share a single implementation of the rules.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
        extra="forbid",
        revalidate_instances="never",
    )

    func: Callable[[], Any]
    attempts: PositiveInt | Unlimited
    delay: Annotated[timedelta, Field(ge=timedelta(0))]
    backoff_factor: Annotated[float, Field(ge=1.0, allow_inf_nan=False)] = 1.0
    max_delay: timedelta | None = None
    is_fatal_error: Callable[[Exception], bool] | None = Field(default=None, repr=False)
    notify_func: Callable[[Exception, int], None] | None = Field(default=None, repr=False)
    stop: StopSignal | None = Field(default=None, repr=False)
    clock: Clock = Field(repr=False)

    @property
    def is_unlimited(self) -> bool:
        return self.attempts is Unlimited.UNLIMITED

    def is_fatal(self, error: Exception) -> bool:
        return self.is_fatal_error is not None and self.is_fatal_error(error)

    def exhausted(self, attempt: int) -> bool:
        """Whether attempt (1-based) was the last one the budget permits."""
        return not self.is_unlimited and attempt >= self.attempts

    def stopped(self) -> bool:
        return self.stop is not None and self.stop.is_set()

    def settle(self, error: Exception, attempt: int) -> RetryError | None:
        """Record a retryable failure and classify whether the session ends.

        Notifies first, then checks the budget, then the stop signal. Budget
        exhaustion wins when both hold on the final permitted attempt.

        Returns:
            The terminal error to raise, or None to keep retrying
        """
        if self.notify_func is not None:
            self.notify_func(error, attempt)
        if self.exhausted(attempt):
            return AttemptsExceeded(error)
        if self.stopped():
            return RetryStopped(error)
        return None


def validate_policy(args: CallArgs) -> RetryPolicy:
    """Validate raw args and produce a new, frozen RetryPolicy.

    Raises:
        InvalidConfiguration: First failing check, in priority order
    """
    if args.func is None:
        raise InvalidConfiguration.missing("func")

    attempts = args.attempts
    if attempts is None or attempts == 0:
        raise InvalidConfiguration.missing("attempts")
    if isinstance(attempts, int) and attempts < 0:
        raise InvalidConfiguration.invalid("attempts", attempts)

    if args.delay is None:
        raise InvalidConfiguration.missing("delay")
    if args.delay < timedelta(0):
        raise InvalidConfiguration.invalid("delay", args.delay)

    factor = 1.0 if args.backoff_factor is None else args.backoff_factor
    if not math.isfinite(factor) or factor < 1:
        raise InvalidConfiguration.invalid("backoff_factor", factor)

    if args.max_delay is not None and args.max_delay < timedelta(0):
        raise InvalidConfiguration.invalid("max_delay", args.max_delay)

    return RetryPolicy(
        func=args.func,
        attempts=attempts,
        delay=args.delay,
        backoff_factor=factor,
        max_delay=args.max_delay or None,
        is_fatal_error=args.is_fatal_error,
        notify_func=args.notify_func,
        stop=args.stop,
        clock=WALL_CLOCK if args.clock is None else args.clock,
    )
