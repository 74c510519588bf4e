"""Decorator form of the retry loop.

Wraps a sync or async function so that every call runs a fresh retry
session with the given options. Options are validated once, when the
function is decorated, so a bad configuration fails at import time rather
than on first use.

Example:
    >>> @retrying(attempts=3, delay=timedelta(seconds=1), backoff_factor=2)
    ... def fetch(url: str) -> bytes:
    ...     return urlopen(url).read()

    >>> @retrying(attempts=UNLIMITED_ATTEMPTS, delay=0.5, stop=token)
    ... async def poll() -> Status:
    ...     return await client.status()
"""

from __future__ import annotations

import functools
import inspect
from typing import Any, Awaitable, Callable, ParamSpec, TypeVar

from .call import build_args, call, call_async

P = ParamSpec("P")
T = TypeVar("T")


def retrying(**options: Any) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Retry the decorated function under the given CallArgs options.

    Args:
        **options: Any CallArgs field except func

    Raises:
        InvalidConfiguration: Options rejected (raised at decoration time)
    """
    if "func" in options:
        raise TypeError("retrying() takes the function from the decorated callable, not func=")

    def decorator(fn: Callable[P, T]) -> Callable[P, T]:
        build_args(func=fn, **options).resolve()

        if inspect.iscoroutinefunction(fn):
            @functools.wraps(fn)
            async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
                bound: Callable[[], Awaitable[Any]] = functools.partial(fn, *args, **kwargs)
                return await call_async(build_args(func=bound, **options))

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            return call(build_args(func=functools.partial(fn, *args, **kwargs), **options))

        return wrapper

    return decorator
