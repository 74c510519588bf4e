"""Cooperative cancellation for retry sessions.

The loop only ever polls a stop signal between attempts; it never blocks on
it and never interrupts an attempt already in flight. Anything exposing a
non-blocking is_set() qualifies: threading.Event, asyncio.Event, or the
one-way CancelToken below.

Example:
    >>> token = CancelToken()
    >>> worker = threading.Thread(target=call, kwargs={"func": poll, "attempts": UNLIMITED_ATTEMPTS,
    ...                                                "delay": 1.0, "stop": token})
    >>> worker.start()
    >>> token.cancel()  # no further attempts after the current one
"""

from __future__ import annotations

import threading
from typing import Protocol, runtime_checkable


@runtime_checkable
class StopSignal(Protocol):
    """Protocol for externally asserted stop flags."""

    def is_set(self) -> bool: ...


class CancelToken:
    """One-way, thread-safe stop flag.

    Unlike threading.Event it cannot be cleared: once cancelled it stays
    cancelled, so a session can never observe a stop being withdrawn.
    """

    __slots__ = ("_event",)

    def __init__(self) -> None:
        self._event = threading.Event()

    @property
    def cancel_called(self) -> bool:
        """Whether cancellation was requested."""
        return self._event.is_set()

    def cancel(self) -> None:
        """Assert the stop signal. Idempotent."""
        self._event.set()

    def is_set(self) -> bool:
        return self._event.is_set()

    def __repr__(self) -> str:
        return f"CancelToken(cancelled={self.cancel_called})"
