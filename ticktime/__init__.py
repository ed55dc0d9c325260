"""Ticktime: exact date/time and duration arithmetic over 64-bit ticks.

A tick is 100 nanoseconds. Both value types wrap a single integer and
derive every field from it on demand.

Core Types:
    DateTime: Instant as unsigned ticks since 0001-01-01 00:00:00
    TimeSpan: Signed duration in ticks

Units:
    DayOfWeek: Monday-first weekday enumeration
    DateTimeOutputFormat: Layouts for DateTime.to_string
    TimeSpanOutputFormat: Layouts for TimeSpan.to_string

Calendar Functions:
    is_leap_year: Gregorian leap year rule
    days_in_month: Length of a month (0 for an invalid month)

Helpers:
    ticktime.conversion: number/string conversion, joining, base64
    ticktime.io: buffered stream copying
    ticktime.clock: injectable wall clock for DateTime.now()

Exceptions:
    TicktimeError: Base exception
    ConversionError: Text does not match the expected grammar
    IoError: Stream ended early

Example:
    >>> from ticktime import DateTime, TimeSpan
    >>> start = DateTime.from_date_and_time(2024, 1, 15, 9, 0)
    >>> end = start + TimeSpan.from_parts(hours=1, minutes=30)
    >>> end.to_string()
    '2024-01-15 10:30:00'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from ticktime.core.datetime import DateTime
from ticktime.core.timespan import TimeSpan

# Units
from ticktime.units.outputformat import DateTimeOutputFormat, TimeSpanOutputFormat
from ticktime.units.weekday import DayOfWeek

# Calendar functions
from ticktime._internal.calendar import days_in_month, is_leap_year

# Exceptions
from ticktime.errors import ConversionError, IoError, TicktimeError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "DateTime",
    "TimeSpan",
    # Units
    "DayOfWeek",
    "DateTimeOutputFormat",
    "TimeSpanOutputFormat",
    # Calendar functions
    "days_in_month",
    "is_leap_year",
    # Exceptions
    "TicktimeError",
    "ConversionError",
    "IoError",
]
