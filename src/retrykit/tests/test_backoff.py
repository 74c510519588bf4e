"""Tests for delay scaling and backoff sequences."""

from __future__ import annotations

from datetime import timedelta
from itertools import islice

import pytest

from retrykit import backoff_delays, scale_duration

MINUTE = timedelta(minutes=1)


@pytest.mark.parametrize(
    ("current", "max_delay", "factor", "expected"),
    [
        (MINUTE, None, 1, MINUTE),
        (MINUTE, None, 2.5, 2 * MINUTE + timedelta(seconds=30)),
        (MINUTE, 3 * MINUTE, 10, 3 * MINUTE),
        (MINUTE, 3 * MINUTE, 2, 2 * MINUTE),
        # Factors below 1 never come from a validated policy but are supported
        (MINUTE, None, 0.5, timedelta(seconds=30)),
        (MINUTE, None, 0, timedelta(0)),
        # Negative factors are treated as positive
        (MINUTE, None, -2, 2 * MINUTE),
    ],
)
def test_scale_duration(current: timedelta, max_delay: timedelta | None, factor: float, expected: timedelta) -> None:
    assert scale_duration(current, max_delay, factor) == expected


def test_scale_duration_zero_max_is_unbounded() -> None:
    assert scale_duration(MINUTE, timedelta(0), 100) == 100 * MINUTE


def test_scale_duration_rounds_to_microseconds() -> None:
    assert scale_duration(timedelta(microseconds=3), None, 1.5) == timedelta(microseconds=4)


def test_scale_duration_saturates_on_overflow() -> None:
    huge = timedelta(days=900_000_000)
    assert scale_duration(huge, None, 2) == timedelta.max
    assert scale_duration(huge, 10 * MINUTE, 2) == 10 * MINUTE


def test_backoff_delays_exponential() -> None:
    assert list(islice(backoff_delays(MINUTE, 2), 4)) == [MINUTE, 2 * MINUTE, 4 * MINUTE, 8 * MINUTE]


def test_backoff_delays_clamped_at_ceiling() -> None:
    delays = list(islice(backoff_delays(MINUTE, 2, 10 * MINUTE), 6))
    assert delays == [MINUTE, 2 * MINUTE, 4 * MINUTE, 8 * MINUTE, 10 * MINUTE, 10 * MINUTE]


def test_backoff_delays_linear_by_default() -> None:
    assert list(islice(backoff_delays(MINUTE), 5)) == [MINUTE] * 5
