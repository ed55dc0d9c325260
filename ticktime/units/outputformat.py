"""Output format enumerations for DateTime and TimeSpan.

These select the layout produced by ``DateTime.to_string`` and
``TimeSpan.to_string``.
"""

from __future__ import annotations

from enum import Enum


class DateTimeOutputFormat(Enum):
    """Layouts understood by DateTime.to_string.

    Examples (for 2024-01-15 14:30:45.123):
        DATE_AND_TIME:               "2024-01-15 14:30:45.123"
        DATE_ONLY:                   "2024-01-15"
        TIME_ONLY:                   "14:30:45.123"
        DATE_TIME_AND_WEEKDAY:       "Monday 2024-01-15 14:30:45.123"
        DATE_TIME_AND_SHORT_WEEKDAY: "Mon 2024-01-15 14:30:45.123"
    """

    DATE_AND_TIME = "date_and_time"
    DATE_ONLY = "date_only"
    TIME_ONLY = "time_only"
    DATE_TIME_AND_WEEKDAY = "date_time_and_weekday"
    DATE_TIME_AND_SHORT_WEEKDAY = "date_time_and_short_weekday"

    @property
    def has_date(self) -> bool:
        return self is not DateTimeOutputFormat.TIME_ONLY

    @property
    def has_time(self) -> bool:
        return self is not DateTimeOutputFormat.DATE_ONLY

    @property
    def has_weekday(self) -> bool:
        return self in (
            DateTimeOutputFormat.DATE_TIME_AND_WEEKDAY,
            DateTimeOutputFormat.DATE_TIME_AND_SHORT_WEEKDAY,
        )


class TimeSpanOutputFormat(Enum):
    """Layouts understood by TimeSpan.to_string.

    Examples (for 1 day, 2 hours, 3 minutes, 4 seconds, 5 milliseconds):
        NORMAL:        "1.02:03:04.005"
        WITH_MEASURES: "1 d 2 h 3 min 4 s 5 ms"
    """

    NORMAL = "normal"
    WITH_MEASURES = "with_measures"


__all__ = ["DateTimeOutputFormat", "TimeSpanOutputFormat"]
