"""Time source abstraction consumed by the retry loop.

The loop needs exactly two capabilities from a clock:
    - now(): current wall time (for the caller's own bookkeeping)
    - after(delay): a single-fire completion signal that fires once delay elapses

The signal is a Timer with a monotonic deadline, so the same value can be
waited on from a thread (wait()) or awaited from a coroutine.

Example:
    >>> timer = WALL_CLOCK.after(timedelta(milliseconds=50))
    >>> timer.done()
    False
    >>> timer.wait()
    >>> timer.done()
    True
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Generator
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Final, Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class Timer:
    """Completion signal that fires at a monotonic deadline.

    Attributes:
        deadline: time.monotonic() value at which the timer fires
    """

    deadline: float

    def remaining(self) -> float:
        """Seconds left before firing (0.0 once fired)."""
        return max(0.0, self.deadline - time.monotonic())

    def done(self) -> bool:
        return self.remaining() == 0.0

    def wait(self) -> None:
        """Block the calling thread until the timer fires."""
        if (left := self.remaining()) > 0.0:
            time.sleep(left)

    def __await__(self) -> Generator[object, None, None]:
        return asyncio.sleep(self.remaining()).__await__()


# Timer that has already fired; waiting on it never blocks
FIRED: Final[Timer] = Timer(float("-inf"))


@runtime_checkable
class Clock(Protocol):
    """Protocol for time sources used by the retry loop."""

    def now(self) -> datetime: ...

    def after(self, delay: timedelta) -> Timer: ...


class WallClock:
    """Real clock backed by the system's wall and monotonic time."""

    __slots__ = ()

    def now(self) -> datetime:
        return datetime.now(UTC)

    def after(self, delay: timedelta) -> Timer:
        return Timer(time.monotonic() + delay.total_seconds())

    def __repr__(self) -> str:
        return "WallClock()"


# Default clock for every policy that does not supply one
WALL_CLOCK: Final[WallClock] = WallClock()
