"""Deterministic clock double for testing retry sessions.

FakeClock records every delay the loop asks for and returns an already
fired timer, so sessions with minute-long backoffs finish instantly.
Virtual time advances by each requested delay, keeping now() consistent
with the schedule the loop believes it followed.

Example:
    >>> clock = FakeClock()
    >>> with pytest.raises(AttemptsExceeded):
    ...     call(func=always_fails, attempts=4, delay=timedelta(minutes=1), clock=clock)
    >>> clock.delays
    [timedelta(minutes=1), timedelta(minutes=1), timedelta(minutes=1)]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from retrykit.runtime.clock import FIRED, Timer


@dataclass
class FakeClock:
    """Clock that records requested delays instead of waiting.

    Attributes:
        current: Virtual wall time, advanced by every after() call
        delays: Delays requested via after(), in order
    """

    current: datetime = field(default_factory=lambda: datetime(2015, 1, 1, tzinfo=UTC))
    delays: list[timedelta] = field(default_factory=list)
    start: datetime = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.start = self.current

    @property
    def call_count(self) -> int:
        return len(self.delays)

    @property
    def elapsed(self) -> timedelta:
        """Total virtual time spent waiting."""
        return sum(self.delays, timedelta())

    def now(self) -> datetime:
        return self.current

    def after(self, delay: timedelta) -> Timer:
        self.delays.append(delay)
        self.current += delay
        return FIRED

    def reset(self) -> None:
        """Forget recorded delays and rewind virtual time to start."""
        self.delays.clear()
        self.current = self.start
