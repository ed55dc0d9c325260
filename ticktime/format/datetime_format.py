"""DateTime formatting and parsing.

Functions:
    format_datetime: Render a DateTime in one of the DateTimeOutputFormat
        layouts.
    parse_datetime: Parse a date, a date and time, or a time of day.

Supported input forms:
    - YYYY-MM-DD
    - YYYY-MM-DD HH:MM[:SS[.f]]  (also with "T" between date and time)
    - YYYY/MM/DD variants of the above
    - Weekday YYYY-MM-DD HH:MM:SS (full or abbreviated English weekday,
      which must match the date)
    - HH:MM[:SS[.f]]  (time of day only)

Two failure modes are kept apart: text that does not match any form
raises ConversionError, while a well-formed date that does not exist
(month 13, February 30) yields the null instant.

Examples:
    >>> from ticktime import DateTime
    >>> format_datetime(DateTime.from_date_and_time(2024, 1, 15, 14, 30, 45, 123))
    '2024-01-15 14:30:45.123'
    >>> parse_datetime("2024-01-15T14:30:45").hour
    14
    >>> parse_datetime("2024-13-01").is_null
    True
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from ticktime._internal.calendar import date_to_ticks, time_to_ticks
from ticktime._internal.constants import WEEKDAY_ABBREVIATIONS, WEEKDAY_NAMES
from ticktime.conversion.stringconversion import string_to_number
from ticktime.errors import ConversionError
from ticktime.units.outputformat import DateTimeOutputFormat

if TYPE_CHECKING:
    from ticktime.core.datetime import DateTime

logger = logging.getLogger(__name__)

_WEEKDAYS = "|".join(WEEKDAY_NAMES + WEEKDAY_ABBREVIATIONS)

_TIME = (
    r"(?P<hour>\d{1,2}):(?P<minute>\d{1,2})"
    r"(?::(?P<second>\d{1,2})(?:\.(?P<fraction>\d+))?)?"
)

_DATETIME_PATTERN = re.compile(
    rf"(?:(?P<weekday>{_WEEKDAYS})\s+)?"
    r"(?P<year>\d{1,4})(?P<sep>[-/])(?P<month>\d{1,2})(?P=sep)(?P<day>\d{1,2})"
    rf"(?:[T ]{_TIME})?",
    re.IGNORECASE,
)

_TIME_PATTERN = re.compile(_TIME)

# Decimal places of one tick within a second
_TICK_DIGITS = 7


def format_datetime(
    dt: DateTime,
    format: DateTimeOutputFormat = DateTimeOutputFormat.DATE_AND_TIME,
    no_milliseconds: bool = False,
) -> str:
    """Format a DateTime.

    Milliseconds are appended as ``.fff`` only when non-zero and not
    suppressed by no_milliseconds; sub-millisecond ticks are never shown.

    Examples:
        >>> from ticktime import DateTime
        >>> dt = DateTime.from_date_and_time(2024, 1, 15, 14, 30, 45, 123)
        >>> format_datetime(dt, DateTimeOutputFormat.DATE_ONLY)
        '2024-01-15'
        >>> format_datetime(dt, DateTimeOutputFormat.DATE_TIME_AND_SHORT_WEEKDAY, True)
        'Mon 2024-01-15 14:30:45'
    """
    segments = []
    if format.has_weekday:
        abbreviation = format is DateTimeOutputFormat.DATE_TIME_AND_SHORT_WEEKDAY
        day_of_week = dt.day_of_week
        segments.append(day_of_week.abbreviation if abbreviation else day_of_week.full_name)
    if format.has_date:
        segments.append(f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}")
    if format.has_time:
        time = f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
        millisecond = dt.millisecond
        if millisecond and not no_milliseconds:
            time += f".{millisecond:03d}"
        segments.append(time)
    return " ".join(segments)


def parse_datetime(text: str) -> DateTime:
    """Parse a DateTime.

    Args:
        text: The text to parse. Surrounding whitespace is ignored.

    Returns:
        The parsed DateTime; the null instant if the date does not exist.
        A time-only string yields a time-of-day DateTime as from_time does.

    Raises:
        ConversionError: If text matches none of the supported forms, or a
            leading weekday does not match the date.

    Examples:
        >>> parse_datetime("Monday 2024-01-15 08:00:00").day
        15
        >>> parse_datetime("12:30").total_ticks == 12 * 36_000_000_000 + 30 * 600_000_000
        True
    """
    from ticktime.core.datetime import DateTime

    stripped = text.strip()

    match = _TIME_PATTERN.fullmatch(stripped)
    if match is not None:
        return DateTime(_time_ticks(match))

    match = _DATETIME_PATTERN.fullmatch(stripped)
    if match is None:
        logger.debug("cannot parse %r as a date/time", text)
        raise ConversionError(f"unrecognized date/time: {text!r}")

    date_ticks = date_to_ticks(
        string_to_number(match["year"]),
        string_to_number(match["month"]),
        string_to_number(match["day"]),
    )
    # the epoch date is indistinguishable from an invalid one, as in from_date_and_time
    if not date_ticks:
        return DateTime()

    result = DateTime(date_ticks + _time_ticks(match) if match["hour"] else date_ticks)

    weekday = match["weekday"]
    if weekday is not None:
        day_of_week = result.day_of_week
        if weekday.lower() not in (day_of_week.full_name.lower(), day_of_week.abbreviation.lower()):
            logger.debug("weekday %r does not match %r", weekday, text)
            raise ConversionError(
                f"weekday {weekday!r} does not match date, expected {day_of_week.full_name}"
            )
    return result


def _time_ticks(match: re.Match[str]) -> int:
    second = match["second"]
    fraction = match["fraction"] or ""
    ticks = time_to_ticks(
        string_to_number(match["hour"]),
        string_to_number(match["minute"]),
        string_to_number(second) if second else 0,
        0,
    )
    if fraction:
        ticks += string_to_number(fraction[:_TICK_DIGITS].ljust(_TICK_DIGITS, "0"))
    return ticks


__all__ = ["format_datetime", "parse_datetime"]
