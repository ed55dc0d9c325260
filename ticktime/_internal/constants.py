"""Internal constants for Ticktime.

Tick units, the day-count tables of the proleptic Gregorian calendar and
the fixed English weekday names. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions (1 tick = 100 ns)
TICKS_PER_MILLISECOND: int = 10_000
TICKS_PER_SECOND: int = 1_000 * TICKS_PER_MILLISECOND
TICKS_PER_MINUTE: int = 60 * TICKS_PER_SECOND
TICKS_PER_HOUR: int = 60 * TICKS_PER_MINUTE
TICKS_PER_DAY: int = 24 * TICKS_PER_HOUR  # 864_000_000_000

NANOS_PER_TICK: int = 100

# 64-bit storage limits
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1
UINT64_MAX: int = 2**64 - 1

# Year limits of the calendar conversion
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# Cycle lengths of the 400/100/4/1-year decomposition
DAYS_PER_YEAR: int = 365
DAYS_PER_4_YEARS: int = 1461
DAYS_PER_100_YEARS: int = 36524
DAYS_PER_400_YEARS: int = 146097

# Day counts from 0001-01-01 to reference dates
DAYS_TO_1601: int = 584388
DAYS_TO_1899: int = 693593
DAYS_TO_1970: int = 719162
DAYS_TO_10000: int = 3652059

# Cumulative days before each month, index 12 closes the year
DAYS_TO_MONTH_365: tuple[int, ...] = (
    0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365,
)
DAYS_TO_MONTH_366: tuple[int, ...] = (
    0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335, 366,
)

# Days in each month, 0-indexed
DAYS_IN_MONTH_365: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
DAYS_IN_MONTH_366: tuple[int, ...] = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Weekday names, Monday first
WEEKDAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
WEEKDAY_ABBREVIATIONS: tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


__all__ = [
    "TICKS_PER_MILLISECOND",
    "TICKS_PER_SECOND",
    "TICKS_PER_MINUTE",
    "TICKS_PER_HOUR",
    "TICKS_PER_DAY",
    "NANOS_PER_TICK",
    "INT64_MIN",
    "INT64_MAX",
    "UINT64_MAX",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_PER_YEAR",
    "DAYS_PER_4_YEARS",
    "DAYS_PER_100_YEARS",
    "DAYS_PER_400_YEARS",
    "DAYS_TO_1601",
    "DAYS_TO_1899",
    "DAYS_TO_1970",
    "DAYS_TO_10000",
    "DAYS_TO_MONTH_365",
    "DAYS_TO_MONTH_366",
    "DAYS_IN_MONTH_365",
    "DAYS_IN_MONTH_366",
    "WEEKDAY_NAMES",
    "WEEKDAY_ABBREVIATIONS",
]
