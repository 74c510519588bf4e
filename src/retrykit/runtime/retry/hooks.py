"""Ready-made notify hooks and fatal-error classifiers.

The loop itself never logs; these hooks are how a session is made
observable.

Example:
    >>> call(
    ...     func=fetch,
    ...     attempts=5,
    ...     delay=1.0,
    ...     notify_func=log_attempts(),
    ...     is_fatal_error=fatal_on(PermissionError, ValueError),
    ... )
    # WARNING retrykit.retry: Attempt 1 failed (ConnectionError): refused
"""

from __future__ import annotations

import logging

from retrykit.foundation.types import FatalClassifier, NotifyFunc

logger = logging.getLogger("retrykit.retry")


def log_attempts(log: logging.Logger | None = None, level: int | str | None = None) -> NotifyFunc:
    """Build a notify hook that logs each failed attempt.

    Args:
        log: Logger to write to (default: "retrykit.retry")
        level: Level name or number; defaults to settings.logging.notify_level

    Raises:
        ValueError: level is not a known level name
    """
    if level is None:
        from retrykit.foundation.config import get_settings
        level = get_settings().logging.notify_level
    if isinstance(level, str):
        if (lvl := logging.getLevelNamesMapping().get(level.upper())) is None:
            raise ValueError(f"unknown log level: {level!r}")
    else:
        lvl = level
    target = log or logger

    def notify(error: Exception, attempt: int) -> None:
        target.log(lvl, f"Attempt {attempt} failed ({type(error).__name__}): {error}")

    return notify


def chain_notify(*hooks: NotifyFunc) -> NotifyFunc:
    """Combine notify hooks; each is called in order for every failure."""

    def notify(error: Exception, attempt: int) -> None:
        for hook in hooks:
            hook(error, attempt)

    return notify


def fatal_on(*exc_types: type[Exception]) -> FatalClassifier:
    """Classifier treating instances of exc_types as fatal (never retried)."""
    if not exc_types:
        raise ValueError("fatal_on() requires at least one exception type")

    def is_fatal(error: Exception) -> bool:
        return isinstance(error, exc_types)

    return is_fatal
