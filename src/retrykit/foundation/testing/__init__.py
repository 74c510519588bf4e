"""Testing utilities for code that embeds retry sessions.

- FakeClock: Records requested delays without real waits
"""

from .clock import FakeClock

__all__ = ["FakeClock"]
