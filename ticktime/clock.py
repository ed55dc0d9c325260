"""Wall-clock access for DateTime.now().

The clock is the only non-deterministic input of the library. Code under
test passes a FixedClock (or sets TICKTIME_CLOCK=fixed) instead of reading
the real system time.
"""

from __future__ import annotations

import time

from ticktime.config import get_settings


class Clock:
    """Source of the current instant, as nanoseconds since the Unix epoch (UTC)."""

    def unix_nanoseconds(self) -> int:
        raise NotImplementedError("No clock implementation selected")


class SystemClock(Clock):
    """Reads the operating system's wall clock once per call."""

    def unix_nanoseconds(self) -> int:
        return time.time_ns()

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock(Clock):
    """A clock frozen at one instant.

    Examples:
        >>> FixedClock(0).unix_nanoseconds()
        0
    """

    def __init__(self, nanoseconds: int = 0) -> None:
        self._nanoseconds = nanoseconds

    def unix_nanoseconds(self) -> int:
        return self._nanoseconds

    def advance(self, nanoseconds: int) -> None:
        """Move the frozen instant forward (or backward, if negative)."""
        self._nanoseconds += nanoseconds

    def __repr__(self) -> str:
        return f"FixedClock({self._nanoseconds})"


def default_clock() -> Clock:
    """Return the clock selected by configuration."""
    settings = get_settings()
    if settings.clock == "fixed":
        return FixedClock(settings.fixed_clock_nanoseconds)
    return SystemClock()


__all__ = ["Clock", "SystemClock", "FixedClock", "default_clock"]
