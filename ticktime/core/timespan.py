"""TimeSpan class representing a signed duration in ticks.

This module provides the TimeSpan class. A tick is 100 nanoseconds; the
tick count is the only stored state, so no normalization step exists.
"""

from __future__ import annotations

from ticktime._internal.constants import (
    INT64_MAX,
    INT64_MIN,
    TICKS_PER_DAY,
    TICKS_PER_HOUR,
    TICKS_PER_MILLISECOND,
    TICKS_PER_MINUTE,
    TICKS_PER_SECOND,
)
from ticktime._internal.ticks import (
    exact_fraction,
    scale_to_ticks,
    truncating_div,
    truncating_mod,
    wrap_int64,
)
from ticktime.units.outputformat import TimeSpanOutputFormat


class TimeSpan:
    """A signed span of time with 100-nanosecond (tick) precision.

    TimeSpan wraps a single signed 64-bit tick count. Arithmetic wraps
    around in two's complement like the underlying 64-bit integer, so
    operators never raise (except for division by zero).

    Component views (days, hours, ...) truncate toward zero, so a negative
    span has non-positive components: -1.5 hours is hours == -1,
    minutes == -30.

    Float arguments must be finite: NaN or infinity raises ValueError in
    the from_* constructors and in scalar multiplication and division.

    Examples:
        >>> span = TimeSpan.from_parts(days=1, hours=2, minutes=3)
        >>> span.days, span.hours, span.minutes
        (1, 2, 3)

        >>> TimeSpan.from_minutes(90).total_hours
        1.5

        >>> str(TimeSpan.from_seconds(3661))
        '01:01:01'
    """

    __slots__ = ("_ticks",)

    def __init__(self, ticks: int = 0) -> None:
        """Create a TimeSpan from a raw tick count.

        Args:
            ticks: Number of 100-nanosecond ticks (can be negative).

        Raises:
            TypeError: If ticks is not an integer.
        """
        if not isinstance(ticks, int):
            raise TypeError(f"ticks must be an int, got {type(ticks).__name__}")
        self._ticks: int = wrap_int64(ticks)

    @classmethod
    def from_parts(
        cls,
        days: int | float = 0,
        hours: int | float = 0,
        minutes: int | float = 0,
        seconds: int | float = 0,
        milliseconds: int | float = 0,
    ) -> TimeSpan:
        """Create a TimeSpan from named components.

        Each component is scaled to ticks and the results are summed.
        Fractions below one tick are truncated, not rounded.

        Raises:
            ValueError: If a component is a NaN or infinite float.

        Examples:
            >>> TimeSpan.from_parts(seconds=1, milliseconds=500).total_ticks
            15000000

            >>> TimeSpan.from_parts(milliseconds=0.00019).total_ticks
            1
        """
        return cls(
            scale_to_ticks(days, TICKS_PER_DAY)
            + scale_to_ticks(hours, TICKS_PER_HOUR)
            + scale_to_ticks(minutes, TICKS_PER_MINUTE)
            + scale_to_ticks(seconds, TICKS_PER_SECOND)
            + scale_to_ticks(milliseconds, TICKS_PER_MILLISECOND)
        )

    @classmethod
    def from_milliseconds(cls, milliseconds: int | float) -> TimeSpan:
        """Create a TimeSpan from a number of milliseconds."""
        return cls(scale_to_ticks(milliseconds, TICKS_PER_MILLISECOND))

    @classmethod
    def from_seconds(cls, seconds: int | float) -> TimeSpan:
        """Create a TimeSpan from a number of seconds."""
        return cls(scale_to_ticks(seconds, TICKS_PER_SECOND))

    @classmethod
    def from_minutes(cls, minutes: int | float) -> TimeSpan:
        """Create a TimeSpan from a number of minutes."""
        return cls(scale_to_ticks(minutes, TICKS_PER_MINUTE))

    @classmethod
    def from_hours(cls, hours: int | float) -> TimeSpan:
        """Create a TimeSpan from a number of hours."""
        return cls(scale_to_ticks(hours, TICKS_PER_HOUR))

    @classmethod
    def from_days(cls, days: int | float) -> TimeSpan:
        """Create a TimeSpan from a number of days.

        Examples:
            >>> TimeSpan.from_days(0.5).total_hours
            12.0
        """
        return cls(scale_to_ticks(days, TICKS_PER_DAY))

    @classmethod
    def from_string(cls, text: str, separator: str = ":") -> TimeSpan:
        """Parse a TimeSpan.

        Accepts ``[-]d.hh:mm:ss[.fffffff]`` as produced by to_string(), and
        a separator-delimited list of 1-4 numbers read as ``s``, ``m:s``,
        ``h:m:s`` or ``d:h:m:s``. Only the seconds part may be fractional.

        Raises:
            ConversionError: If text does not match that grammar.

        Examples:
            >>> TimeSpan.from_string("1.02:03:04.005") == TimeSpan.from_parts(1, 2, 3, 4, 5)
            True
            >>> TimeSpan.from_string("1:30").total_seconds
            90.0
        """
        from ticktime.format.timespan_format import parse_timespan

        return parse_timespan(text, separator)

    @classmethod
    def infinity(cls) -> TimeSpan:
        """Return the largest representable TimeSpan."""
        return cls(INT64_MAX)

    @classmethod
    def negative_infinity(cls) -> TimeSpan:
        """Return the smallest representable TimeSpan."""
        return cls(INT64_MIN)

    # Queries

    @property
    def total_ticks(self) -> int:
        """Return the raw tick count."""
        return self._ticks

    @property
    def days(self) -> int:
        """Return the whole days."""
        return truncating_div(self._ticks, TICKS_PER_DAY)

    @property
    def hours(self) -> int:
        """Return the hours component (-23 to 23)."""
        return truncating_mod(truncating_div(self._ticks, TICKS_PER_HOUR), 24)

    @property
    def minutes(self) -> int:
        """Return the minutes component (-59 to 59)."""
        return truncating_mod(truncating_div(self._ticks, TICKS_PER_MINUTE), 60)

    @property
    def seconds(self) -> int:
        """Return the seconds component (-59 to 59)."""
        return truncating_mod(truncating_div(self._ticks, TICKS_PER_SECOND), 60)

    @property
    def milliseconds(self) -> int:
        """Return the milliseconds component (-999 to 999)."""
        return truncating_mod(truncating_div(self._ticks, TICKS_PER_MILLISECOND), 1000)

    @property
    def total_days(self) -> float:
        return self._ticks / TICKS_PER_DAY

    @property
    def total_hours(self) -> float:
        return self._ticks / TICKS_PER_HOUR

    @property
    def total_minutes(self) -> float:
        return self._ticks / TICKS_PER_MINUTE

    @property
    def total_seconds(self) -> float:
        return self._ticks / TICKS_PER_SECOND

    @property
    def total_milliseconds(self) -> float:
        return self._ticks / TICKS_PER_MILLISECOND

    @property
    def is_null(self) -> bool:
        """Return True if this span is zero ticks long."""
        return self._ticks == 0

    @property
    def is_negative(self) -> bool:
        return self._ticks < 0

    @property
    def is_infinity(self) -> bool:
        return self._ticks == INT64_MAX

    @property
    def is_negative_infinity(self) -> bool:
        return self._ticks == INT64_MIN

    # Formatting

    def to_string(
        self,
        format: TimeSpanOutputFormat = TimeSpanOutputFormat.NORMAL,
        no_milliseconds: bool = False,
        *,
        always_show_days: bool | None = None,
    ) -> str:
        """Format this span.

        Args:
            format: NORMAL renders ``[-]d.hh:mm:ss[.fff]``; WITH_MEASURES
                renders ``1 d 2 h 3 min 4 s 5 ms``.
            no_milliseconds: Suppress the millisecond segment.
            always_show_days: Render the day segment of the NORMAL format
                even when it is zero. Defaults to the configured
                timespan_always_show_days.

        Examples:
            >>> TimeSpan.from_parts(1, 2, 3, 4, 5).to_string()
            '1.02:03:04.005'
            >>> TimeSpan.from_parts(1, 2, 3, 4, 5).to_string(no_milliseconds=True)
            '1.02:03:04'
            >>> TimeSpan.from_parts(1, 2, 3, 4, 5).to_string(TimeSpanOutputFormat.WITH_MEASURES)
            '1 d 2 h 3 min 4 s 5 ms'
        """
        from ticktime.format.timespan_format import format_timespan

        return format_timespan(self, format, no_milliseconds, always_show_days=always_show_days)

    # Arithmetic

    def __add__(self, other: object) -> TimeSpan:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return TimeSpan(self._ticks + other._ticks)

    def __radd__(self, other: object) -> TimeSpan:
        """Support sum() by handling 0 + TimeSpan."""
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> TimeSpan:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return TimeSpan(self._ticks - other._ticks)

    def __neg__(self) -> TimeSpan:
        return TimeSpan(-self._ticks)

    def __pos__(self) -> TimeSpan:
        return self

    def __abs__(self) -> TimeSpan:
        return TimeSpan(abs(self._ticks))

    def __mul__(self, other: object) -> TimeSpan:
        """Multiply by a scalar.

        Integer factors are exact; float factors truncate toward zero
        at the tick boundary.

        Raises:
            ValueError: If other is a NaN or infinite float.

        Examples:
            >>> (TimeSpan.from_seconds(30) * 3).total_seconds
            90.0
            >>> (TimeSpan(3) * 0.5).total_ticks
            1
        """
        if isinstance(other, bool) or not isinstance(other, (int, float)):
            return NotImplemented
        if isinstance(other, int):
            return TimeSpan(self._ticks * other)
        return TimeSpan(int(self._ticks * exact_fraction(other)))

    def __rmul__(self, other: object) -> TimeSpan:
        return self.__mul__(other)

    def __truediv__(self, other: object) -> TimeSpan | float:
        """Divide by a scalar, or by another TimeSpan.

        Dividing by a number truncates toward zero at the tick boundary.
        Dividing by a TimeSpan returns their ratio as a float.

        Raises:
            ZeroDivisionError: If other is zero.
            ValueError: If other is a NaN or infinite float.

        Examples:
            >>> (TimeSpan(-7) / 2).total_ticks
            -3
            >>> TimeSpan.from_hours(3) / TimeSpan.from_hours(2)
            1.5
        """
        if isinstance(other, TimeSpan):
            return self._ticks / other._ticks
        if isinstance(other, bool) or not isinstance(other, (int, float)):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("division by zero")
        if isinstance(other, int):
            return TimeSpan(truncating_div(self._ticks, other))
        return TimeSpan(int(self._ticks / exact_fraction(other)))

    def __floordiv__(self, other: object) -> TimeSpan | int:
        """Floor-divide by an integer, or count whole other spans.

        Examples:
            >>> (TimeSpan(-7) // 2).total_ticks
            -4
            >>> TimeSpan.from_days(1) // TimeSpan.from_hours(5)
            4
        """
        if isinstance(other, TimeSpan):
            return self._ticks // other._ticks
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return TimeSpan(self._ticks // other)

    # Comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self._ticks == other._ticks

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self._ticks != other._ticks

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self._ticks < other._ticks

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self._ticks <= other._ticks

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self._ticks > other._ticks

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self._ticks >= other._ticks

    def __hash__(self) -> int:
        return hash(self._ticks)

    def __bool__(self) -> bool:
        """Return True if this is a non-zero span."""
        return self._ticks != 0

    def __repr__(self) -> str:
        return f"TimeSpan({self._ticks})"

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["TimeSpan"]
