"""Terminal error classification for retry sessions.

Every way a retry session can end without success maps to one exception:
    - InvalidConfiguration: rejected before the operation ever runs
    - AttemptsExceeded: the attempt budget ran out
    - RetryStopped: the stop signal was asserted between attempts

A fatal error (one the classifier opts out of retrying) is not wrapped;
the loop re-raises the operation's own exception.

Predicates walk the exception chain so callers can branch on the
classification even after the error has been wrapped by other layers.

Example:
    >>> try:
    ...     call(func=fetch, attempts=3, delay=1.0)
    ... except Exception as e:
    ...     if is_attempts_exceeded(e):
    ...         print(f"gave up: {retry_cause(e).last_error}")
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from pydantic import ValidationError


class RetryError(Exception):
    """Base class for every error raised by the retry loop itself."""


class InvalidConfiguration(RetryError, ValueError):
    """Retry arguments failed validation; the operation was never invoked.

    Attributes:
        field: Name of the offending argument (e.g. "func", "backoff_factor")
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message)

    def __reduce__(self) -> tuple[type[Self], tuple[str, str]]:
        return type(self), (self.field, str(self))

    @classmethod
    def missing(cls, field: str) -> Self:
        return cls(field, f"missing {field} not valid")

    @classmethod
    def invalid(cls, field: str, value: object) -> Self:
        return cls(field, f"{field} of {value} not valid")

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> Self:
        """Convert the first pydantic error into a classified configuration error."""
        first = exc.errors()[0]
        # Union members append their tag to loc; only the field name matters here
        field = str(first["loc"][0]) if first["loc"] else "args"
        return cls(field, f"{field} not valid: {first['msg']}")


class AttemptsExceeded(RetryError):
    """Every permitted attempt failed.

    Attributes:
        last_error: Exception raised by the final attempt
    """

    __slots__ = ("last_error",)

    def __init__(self, last_error: Exception) -> None:
        self.last_error = last_error
        super().__init__(f"attempt count exceeded: {last_error}")

    def __reduce__(self) -> tuple[type[Self], tuple[Exception]]:
        return type(self), (self.last_error,)


class RetryStopped(RetryError):
    """The stop signal was asserted before another attempt could start.

    Attributes:
        last_error: Exception raised by the attempt preceding the stop
    """

    __slots__ = ("last_error",)

    def __init__(self, last_error: Exception) -> None:
        self.last_error = last_error
        super().__init__(f"retry stopped: {last_error}")

    def __reduce__(self) -> tuple[type[Self], tuple[Exception]]:
        return type(self), (self.last_error,)


def _chain(exc: BaseException | None) -> Iterator[BaseException]:
    """Yield exc and its causes: explicit __cause__ first, then unsuppressed __context__."""
    seen: set[int] = set()
    while exc is not None and id(exc) not in seen:
        seen.add(id(exc))
        yield exc
        exc = exc.__cause__ if exc.__cause__ is not None else (
            None if exc.__suppress_context__ else exc.__context__
        )


def retry_cause(exc: BaseException | None) -> RetryError | None:
    """Find the outermost RetryError in the exception chain, if any."""
    return next((e for e in _chain(exc) if isinstance(e, RetryError)), None)


def is_attempts_exceeded(exc: BaseException | None) -> bool:
    return isinstance(retry_cause(exc), AttemptsExceeded)


def is_retry_stopped(exc: BaseException | None) -> bool:
    return isinstance(retry_cause(exc), RetryStopped)


def is_invalid_configuration(exc: BaseException | None) -> bool:
    return isinstance(retry_cause(exc), InvalidConfiguration)
