"""DayOfWeek enumeration.

This module provides the DayOfWeek enum returned by DateTime.day_of_week.
"""

from __future__ import annotations

from enum import Enum

from ticktime._internal.constants import WEEKDAY_ABBREVIATIONS, WEEKDAY_NAMES


class DayOfWeek(Enum):
    """Day of the week, Monday first.

    The numeric value equals ``(ticks // TICKS_PER_DAY) % 7`` of a DateTime,
    which anchors 0001-01-01 on a Monday.

    Examples:
        >>> DayOfWeek(0)
        <DayOfWeek.MONDAY: 0>

        >>> DayOfWeek.SUNDAY.full_name
        'Sunday'

        >>> DayOfWeek.SUNDAY.abbreviation
        'Sun'
    """

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def full_name(self) -> str:
        """Return the English name of the day."""
        return WEEKDAY_NAMES[self.value]

    @property
    def abbreviation(self) -> str:
        """Return the three-letter English abbreviation of the day."""
        return WEEKDAY_ABBREVIATIONS[self.value]

    @property
    def is_weekend(self) -> bool:
        return self in (DayOfWeek.SATURDAY, DayOfWeek.SUNDAY)


__all__ = ["DayOfWeek"]
