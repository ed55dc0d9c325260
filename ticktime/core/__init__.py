"""Core value types: TimeSpan and DateTime."""

from __future__ import annotations

from ticktime.core.datetime import DateTime
from ticktime.core.timespan import TimeSpan

__all__: list[str] = [
    "DateTime",
    "TimeSpan",
]
