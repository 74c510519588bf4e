"""Deterministic delay scaling for retry sessions.

Delay after each failed attempt = min(previous * |factor|, max_delay)

There is no jitter: the same inputs always yield the same sequence, which
is what makes the loop testable with a recording clock.

Example:
    >>> scale_duration(timedelta(minutes=1), None, 2.5)
    datetime.timedelta(seconds=150)
    >>> list(islice(backoff_delays(timedelta(minutes=1), 2, timedelta(minutes=10)), 6))
    # 1, 2, 4, 8, 10, 10 minutes
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import timedelta


def scale_duration(current: timedelta, max_delay: timedelta | None, factor: float) -> timedelta:
    """Scale a delay by factor, clamped to max_delay.

    The sign of factor is ignored. Factors below 1 shrink the delay and 0
    yields zero; the loop never passes those (validation rejects them) but
    they are well-defined here.

    Args:
        current: Delay to scale
        max_delay: Ceiling; None or zero means unbounded
        factor: Multiplier applied to current

    Returns:
        Scaled delay rounded to microseconds. Saturates at max_delay (or
        timedelta.max when unbounded) instead of overflowing.
    """
    try:
        result = current * abs(factor)
    except OverflowError:
        return max_delay or timedelta.max
    if max_delay and result > max_delay:
        return max_delay
    return result


def backoff_delays(
    delay: timedelta,
    factor: float = 1.0,
    max_delay: timedelta | None = None,
) -> Iterator[timedelta]:
    """Yield the inter-attempt delays a retry session would request, forever."""
    while True:
        yield delay
        delay = scale_duration(delay, max_delay, factor)
