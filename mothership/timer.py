"""Clocks and countdown timers driving all game timing."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Protocol


class Clock(Protocol):
    """Anything that reports the current game time in seconds."""

    def now(self) -> float: ...


class ManualClock:
    """A clock that only moves when told to; useful for tests and replays."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = float(start)

    def now(self) -> float:
        """Return the current time in seconds."""
        return self._now

    def advance(self, seconds: float) -> float:
        """Move the clock forward by ``seconds`` and return the new time."""
        if seconds < 0:
            raise ValueError("a clock cannot move backwards")
        self._now += seconds
        return self._now


class MonotonicClock:
    """Seconds elapsed since the clock was created."""

    def __init__(self) -> None:
        self._origin = time.monotonic()

    def now(self) -> float:
        """Return seconds since creation."""
        return time.monotonic() - self._origin


DEFAULT_CLOCK = MonotonicClock()


@dataclass
class Timer:
    """A countdown that is finished once the clock reaches its end time.

    A timer that was never started ends at time zero, so it reports
    itself finished straight away.
    """

    clock: Clock = field(default=DEFAULT_CLOCK, repr=False)
    start_time: float = 0.0
    end_time: float = 0.0

    def start(self, duration: float) -> None:
        """Start counting down ``duration`` seconds from now."""
        self.start_time = self.clock.now()
        self.end_time = self.start_time + duration

    @property
    def finished(self) -> bool:
        """True once the end time has been reached."""
        return self.clock.now() >= self.end_time

    @property
    def time_left(self) -> float:
        """Seconds remaining until the end time; negative once past it."""
        return self.end_time - self.clock.now()