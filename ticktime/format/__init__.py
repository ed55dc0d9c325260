"""Textual formatting and parsing of DateTime and TimeSpan.

Functions:
    format_datetime: Format a DateTime in a DateTimeOutputFormat layout.
    parse_datetime: Parse a date, date and time, or time of day.
    format_timespan: Format a TimeSpan as [-]d.hh:mm:ss[.fff] or with measures.
    parse_timespan: Parse a TimeSpan.

Examples:
    >>> from ticktime import DateTime
    >>> from ticktime.format import format_datetime, parse_datetime

    >>> dt = parse_datetime("2024-01-15 14:30:45")
    >>> format_datetime(dt)
    '2024-01-15 14:30:45'
"""

from __future__ import annotations

from ticktime.format.datetime_format import format_datetime, parse_datetime
from ticktime.format.timespan_format import format_timespan, parse_timespan

__all__: list[str] = [
    "format_datetime",
    "parse_datetime",
    "format_timespan",
    "parse_timespan",
]
