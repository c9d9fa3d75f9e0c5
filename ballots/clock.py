"""Clock capabilities injected into the registry.

The registry never reads the wall clock directly. Production code passes a
``SystemClock``; tests pass a ``ManualClock`` and move time forward by hand.
"""

import time
from typing import Protocol


class Clock(Protocol):
    def now(self) -> int:
        """Current time as integer seconds since the epoch."""
        ...


class SystemClock:
    """Wall clock, truncated to whole seconds."""

    def now(self) -> int:
        return int(time.time())


class ManualClock:
    """Clock that only moves when told to.

    Example:
        >>> clock = ManualClock(1_000)
        >>> clock.advance(90)
        1090
    """

    def __init__(self, start: int = 0):
        self._now = start

    def now(self) -> int:
        return self._now

    def set(self, timestamp: int) -> None:
        self._now = timestamp

    def advance(self, seconds: int) -> int:
        """Move the clock forward and return the new time."""
        if seconds < 0:
            raise ValueError("Cannot move a clock backwards")
        self._now += seconds
        return self._now
