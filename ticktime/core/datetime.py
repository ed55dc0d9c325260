"""DateTime class representing an instant as ticks since 0001-01-01.

This module provides the DateTime class. The instant is stored as one
unsigned 64-bit tick count (1 tick = 100 ns) since 0001-01-01 00:00:00 of
the proleptic Gregorian calendar; every calendar field is derived from it
on demand.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, overload

from ticktime._internal.calendar import (
    DatePart,
    date_to_ticks,
    days_in_month,
    get_date_part,
    is_leap_year,
    is_valid_date,
    time_to_ticks,
)
from ticktime._internal.constants import (
    DAYS_TO_10000,
    DAYS_TO_1970,
    NANOS_PER_TICK,
    TICKS_PER_DAY,
    TICKS_PER_HOUR,
    TICKS_PER_MILLISECOND,
    TICKS_PER_MINUTE,
    TICKS_PER_SECOND,
)
from ticktime._internal.ticks import scale_to_ticks, wrap_uint64
from ticktime.core.timespan import TimeSpan
from ticktime.units.outputformat import DateTimeOutputFormat
from ticktime.units.weekday import DayOfWeek

if TYPE_CHECKING:
    from ticktime.clock import Clock

logger = logging.getLogger(__name__)

_UNIX_EPOCH_TICKS = DAYS_TO_1970 * TICKS_PER_DAY
_MAX_TICKS = DAYS_TO_10000 * TICKS_PER_DAY


class DateTime:
    """An instant in time with 100-nanosecond (tick) precision.

    DateTime wraps one unsigned 64-bit tick count since 0001-01-01 00:00:00.
    It carries no timezone. Tick 0 is the *null* instant: an invalid date
    passed to from_date resolves to it instead of raising, which means the
    epoch itself cannot be told apart from a failed construction. Use
    try_from_date when that distinction matters.

    Arithmetic wraps around in the unsigned 64-bit range and never raises.

    Examples:
        >>> dt = DateTime.from_date_and_time(2024, 1, 15, 14, 30, 45)
        >>> dt.year, dt.month, dt.day
        (2024, 1, 15)
        >>> dt.day_of_week
        <DayOfWeek.MONDAY: 0>

        >>> DateTime.from_date(2024, 13, 1).is_null
        True

        >>> (DateTime.from_date(2024, 1, 1) - DateTime.from_date(2023, 1, 1)).days
        365
    """

    __slots__ = ("_ticks",)

    def __init__(self, ticks: int = 0) -> None:
        """Create a DateTime from a raw tick count.

        Args:
            ticks: Ticks since 0001-01-01 00:00:00; 0 is the null instant.

        Raises:
            TypeError: If ticks is not an integer.
        """
        if not isinstance(ticks, int):
            raise TypeError(f"ticks must be an int, got {type(ticks).__name__}")
        self._ticks: int = wrap_uint64(ticks)

    @classmethod
    def from_date(cls, year: int = 1, month: int = 1, day: int = 1) -> DateTime:
        """Create a DateTime at midnight of the given date.

        Returns:
            The instant, or the null instant if year is outside 1-9999,
            month outside 1-12 or day outside the month. Never raises.

        Examples:
            >>> DateTime.from_date(2024, 2, 29).is_null
            False
            >>> DateTime.from_date(2023, 2, 29).is_null
            True
        """
        return cls(date_to_ticks(year, month, day))

    @classmethod
    def try_from_date(cls, year: int, month: int, day: int) -> DateTime | None:
        """Create a DateTime at midnight of the given date, or None.

        Unlike from_date, an invalid date is reported as None, so
        0001-01-01 (tick 0) is distinguishable from a failure.

        Examples:
            >>> DateTime.try_from_date(1, 1, 1)
            DateTime(0)
            >>> DateTime.try_from_date(2024, 0, 1) is None
            True
        """
        if not is_valid_date(year, month, day):
            return None
        return cls(date_to_ticks(year, month, day))

    @classmethod
    def from_time(
        cls,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int | float = 0,
    ) -> DateTime:
        """Create a DateTime holding only a time-of-day magnitude.

        Components are summed as given and not bounded to one day, so
        hour=25 rolls into the next day. Fractional milliseconds below one
        tick are truncated.

        Examples:
            >>> DateTime.from_time(14, 30).time_of_day.total_minutes
            870.0
            >>> DateTime.from_time(25).day
            2
        """
        return cls(time_to_ticks(hour, minute, second, millisecond))

    @classmethod
    def from_date_and_time(
        cls,
        year: int = 1,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int | float = 0,
    ) -> DateTime:
        """Create a DateTime from date and time components.

        The result is the null instant whenever the date part is invalid,
        even if the time part alone would be valid.

        Examples:
            >>> DateTime.from_date_and_time(2024, 1, 15, 12).hour
            12
            >>> DateTime.from_date_and_time(2024, 1, 32, 12).is_null
            True
        """
        ticks = date_to_ticks(year, month, day)
        if not ticks:
            return cls()
        return cls(ticks + time_to_ticks(hour, minute, second, millisecond))

    @classmethod
    def from_string(cls, text: str) -> DateTime:
        """Parse a DateTime.

        Accepts ``YYYY-MM-DD[(T| )HH:MM[:SS[.f]]]``, ``/`` as the date
        separator, a leading weekday name and time-only ``HH:MM[:SS[.f]]``.

        Raises:
            ConversionError: If text matches none of the supported forms.

        Examples:
            >>> DateTime.from_string("2024-01-15 14:30:45.5").millisecond
            500
        """
        from ticktime.format.datetime_format import parse_datetime

        return parse_datetime(text)

    @classmethod
    def from_timestamp(cls, seconds: int | float) -> DateTime:
        """Create a DateTime from seconds since the Unix epoch (UTC).

        Instants before 0001-01-01 or after 9999-12-31 collapse to the
        null instant.

        Raises:
            ValueError: If seconds is a NaN or infinite float.

        Examples:
            >>> DateTime.from_timestamp(0) == DateTime.unix_epoch_start()
            True
            >>> str(DateTime.from_timestamp(1705329045.25))
            '2024-01-15 14:30:45.250'
        """
        return cls._from_unix_ticks(scale_to_ticks(seconds, TICKS_PER_SECOND))

    @classmethod
    def unix_epoch_start(cls) -> DateTime:
        """Return 1970-01-01 00:00:00."""
        return cls(_UNIX_EPOCH_TICKS)

    @classmethod
    def now(cls, clock: Clock | None = None) -> DateTime:
        """Return the current instant (UTC).

        Args:
            clock: Clock to read. Defaults to the configured clock, which
                is the system wall clock unless TICKTIME_CLOCK=fixed.

        Examples:
            >>> from ticktime.clock import FixedClock
            >>> DateTime.now(FixedClock(0)) == DateTime.unix_epoch_start()
            True
        """
        if clock is None:
            from ticktime.clock import default_clock

            clock = default_clock()
        return cls._from_unix_ticks(clock.unix_nanoseconds() // NANOS_PER_TICK)

    @classmethod
    def _from_unix_ticks(cls, unix_ticks: int) -> DateTime:
        ticks = _UNIX_EPOCH_TICKS + unix_ticks
        if ticks < 0 or ticks >= _MAX_TICKS:
            logger.debug("instant %d ticks from the Unix epoch out of range, resolving to null", unix_ticks)
            return cls()
        return cls(ticks)

    # Queries

    @property
    def total_ticks(self) -> int:
        """Return the raw tick count."""
        return self._ticks

    @property
    def year(self) -> int:
        return get_date_part(self._ticks, DatePart.YEAR)

    @property
    def month(self) -> int:
        return get_date_part(self._ticks, DatePart.MONTH)

    @property
    def day(self) -> int:
        return get_date_part(self._ticks, DatePart.DAY)

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366)."""
        return get_date_part(self._ticks, DatePart.DAY_OF_YEAR)

    @property
    def day_of_week(self) -> DayOfWeek:
        """Return the day of the week; 0001-01-01 is a Monday."""
        return DayOfWeek(self._ticks // TICKS_PER_DAY % 7)

    @property
    def hour(self) -> int:
        return self._ticks // TICKS_PER_HOUR % 24

    @property
    def minute(self) -> int:
        return self._ticks // TICKS_PER_MINUTE % 60

    @property
    def second(self) -> int:
        return self._ticks // TICKS_PER_SECOND % 60

    @property
    def millisecond(self) -> int:
        return self._ticks // TICKS_PER_MILLISECOND % 1000

    @property
    def time_of_day(self) -> TimeSpan:
        """Return the time elapsed since midnight."""
        return TimeSpan(self._ticks % TICKS_PER_DAY)

    @property
    def is_null(self) -> bool:
        """Return True for tick 0 (also 0001-01-01 00:00:00)."""
        return self._ticks == 0

    @property
    def is_leap_year(self) -> bool:
        """Return True if this instant falls in a leap year."""
        return is_leap_year(self.year)

    @staticmethod
    def is_leap_year_of(year: int) -> bool:
        """Return True if year is a Gregorian leap year.

        Examples:
            >>> DateTime.is_leap_year_of(1900), DateTime.is_leap_year_of(2000)
            (False, True)
        """
        return is_leap_year(year)

    @staticmethod
    def days_in_month(year: int, month: int) -> int:
        """Return the number of days in month, or 0 if month is not 1-12.

        Examples:
            >>> DateTime.days_in_month(2024, 2)
            29
        """
        return days_in_month(year, month)

    def is_same_day(self, other: DateTime) -> bool:
        """Return True if both instants fall on the same calendar day."""
        return self._ticks // TICKS_PER_DAY == other._ticks // TICKS_PER_DAY

    # Formatting

    def to_string(
        self,
        format: DateTimeOutputFormat = DateTimeOutputFormat.DATE_AND_TIME,
        no_milliseconds: bool = False,
    ) -> str:
        """Format this instant.

        Examples:
            >>> dt = DateTime.from_date_and_time(2024, 1, 15, 14, 30, 45, 123)
            >>> dt.to_string()
            '2024-01-15 14:30:45.123'
            >>> dt.to_string(DateTimeOutputFormat.TIME_ONLY, no_milliseconds=True)
            '14:30:45'
            >>> dt.to_string(DateTimeOutputFormat.DATE_TIME_AND_WEEKDAY)
            'Monday 2024-01-15 14:30:45.123'
        """
        from ticktime.format.datetime_format import format_datetime

        return format_datetime(self, format, no_milliseconds)

    @staticmethod
    def print_day_of_week(day_of_week: DayOfWeek, abbreviation: bool = False) -> str:
        """Return the English name of day_of_week.

        Examples:
            >>> DateTime.print_day_of_week(DayOfWeek.FRIDAY, abbreviation=True)
            'Fri'
        """
        return day_of_week.abbreviation if abbreviation else day_of_week.full_name

    # Arithmetic

    @overload
    def __add__(self, other: TimeSpan) -> DateTime: ...

    @overload
    def __add__(self, other: DateTime) -> TimeSpan: ...

    def __add__(self, other: object) -> DateTime | TimeSpan:
        """Shift by a TimeSpan, or sum the ticks of two DateTimes.

        Examples:
            >>> (DateTime.from_date(2024, 2, 28) + TimeSpan.from_days(1)).day
            29
        """
        if isinstance(other, TimeSpan):
            return DateTime(self._ticks + other.total_ticks)
        if isinstance(other, DateTime):
            return TimeSpan(self._ticks + other._ticks)
        return NotImplemented

    def __radd__(self, other: object) -> DateTime:
        if isinstance(other, TimeSpan):
            return DateTime(self._ticks + other.total_ticks)
        return NotImplemented

    @overload
    def __sub__(self, other: TimeSpan) -> DateTime: ...

    @overload
    def __sub__(self, other: DateTime) -> TimeSpan: ...

    def __sub__(self, other: object) -> DateTime | TimeSpan:
        """Shift back by a TimeSpan, or measure the span between two instants.

        Examples:
            >>> (DateTime.from_date(2024, 3, 1) - TimeSpan.from_days(1)).day
            29
        """
        if isinstance(other, TimeSpan):
            return DateTime(self._ticks - other.total_ticks)
        if isinstance(other, DateTime):
            return TimeSpan(self._ticks - other._ticks)
        return NotImplemented

    # Comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ticks == other._ticks

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ticks != other._ticks

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ticks < other._ticks

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ticks <= other._ticks

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ticks > other._ticks

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ticks >= other._ticks

    def __hash__(self) -> int:
        return hash(self._ticks)

    def __bool__(self) -> bool:
        """Return False for the null instant."""
        return self._ticks != 0

    def __repr__(self) -> str:
        return f"DateTime({self._ticks})"

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["DateTime"]
