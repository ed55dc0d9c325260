"""Unit enumerations: weekdays and output formats."""

from __future__ import annotations

from ticktime.units.outputformat import DateTimeOutputFormat, TimeSpanOutputFormat
from ticktime.units.weekday import DayOfWeek

__all__: list[str] = [
    "DayOfWeek",
    "DateTimeOutputFormat",
    "TimeSpanOutputFormat",
]
