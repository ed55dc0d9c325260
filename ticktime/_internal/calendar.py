"""Calendar utilities for Ticktime.

This module converts between proleptic Gregorian dates and tick counts
since 0001-01-01 00:00:00 using the 400/100/4/1-year cycle decomposition.

Tick 0 doubles as the null instant, so an invalid date converts to 0.

This module is not part of the public API.
"""

from __future__ import annotations

import logging
from enum import Enum

from ticktime._internal.constants import (
    DAYS_IN_MONTH_365,
    DAYS_IN_MONTH_366,
    DAYS_PER_100_YEARS,
    DAYS_PER_400_YEARS,
    DAYS_PER_4_YEARS,
    DAYS_PER_YEAR,
    DAYS_TO_MONTH_365,
    DAYS_TO_MONTH_366,
    MAX_YEAR,
    MIN_YEAR,
    TICKS_PER_DAY,
    TICKS_PER_HOUR,
    TICKS_PER_MILLISECOND,
    TICKS_PER_MINUTE,
    TICKS_PER_SECOND,
)
from ticktime._internal.ticks import scale_to_ticks

logger = logging.getLogger(__name__)


class DatePart(Enum):
    """Selects the field computed by get_date_part."""

    YEAR = "year"
    MONTH = "month"
    DAY_OF_YEAR = "day_of_year"
    DAY = "day"


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
    """
    if year % 4 != 0:
        return False
    if year % 100 == 0:
        return year % 400 == 0
    return True


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month, or 0 if month is not in 1-12.
    """
    if month < 1 or month > 12:
        return 0
    if is_leap_year(year):
        return DAYS_IN_MONTH_366[month - 1]
    return DAYS_IN_MONTH_365[month - 1]


def is_valid_date(year: int, month: int, day: int) -> bool:
    """Check that year, month, day name a date the tick range can hold.

    Examples:
        >>> is_valid_date(2024, 2, 29)
        True
        >>> is_valid_date(2023, 2, 29)
        False
        >>> is_valid_date(10000, 1, 1)
        False
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        return False
    return 1 <= day <= days_in_month(year, month)


def date_to_ticks(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ticks since 0001-01-01.

    The passed years are decomposed into 400-, 100-, 4- and 1-year
    blocks, each contributing its fixed day count.

    Args:
        year: The year (1-9999).
        month: The month (1-12).
        day: The day of the month.

    Returns:
        The tick count at midnight of that date, or 0 (the null instant)
        if any component is out of range.

    Examples:
        >>> date_to_ticks(1, 1, 2)
        864000000000
        >>> date_to_ticks(2023, 2, 29)
        0
    """
    if not is_valid_date(year, month, day):
        logger.debug("date %04d-%02d-%02d out of range, resolving to null", year, month, day)
        return 0

    full_400_year_blocks, passed_years = divmod(year - 1, 400)
    full_100_year_blocks, passed_years = divmod(passed_years, 100)
    full_4_year_blocks, full_years = divmod(passed_years, 4)
    days_to_month = DAYS_TO_MONTH_366 if is_leap_year(year) else DAYS_TO_MONTH_365

    passed_days = (
        full_400_year_blocks * DAYS_PER_400_YEARS
        + full_100_year_blocks * DAYS_PER_100_YEARS
        + full_4_year_blocks * DAYS_PER_4_YEARS
        + full_years * DAYS_PER_YEAR
        + days_to_month[month - 1]
        + day
        - 1
    )
    return passed_days * TICKS_PER_DAY


def time_to_ticks(hour: int, minute: int, second: int, millisecond: int | float) -> int:
    """Convert a time of day to ticks by plain summation.

    Components are not bounded; excess rolls into higher-order ticks.
    Fractional milliseconds below one tick are truncated.
    """
    return (
        hour * TICKS_PER_HOUR
        + minute * TICKS_PER_MINUTE
        + second * TICKS_PER_SECOND
        + scale_to_ticks(millisecond, TICKS_PER_MILLISECOND)
    )


def get_date_part(ticks: int, part: DatePart) -> int:
    """Extract a calendar field from a tick count.

    Walks the 400/100/4/1-year decomposition in reverse. The fourth
    100-year block and the fourth 1-year block are clamped to 3 so that
    the last day of a leap cycle stays in its own year.

    Args:
        ticks: Ticks since 0001-01-01 00:00:00.
        part: The field to compute.

    Returns:
        The requested field (year, month 1-12, day of year 1-366, day 1-31).

    Examples:
        >>> get_date_part(date_to_ticks(2000, 12, 31), DatePart.DAY_OF_YEAR)
        366
    """
    full_days = ticks // TICKS_PER_DAY
    full_400_year_blocks, days = divmod(full_days, DAYS_PER_400_YEARS)

    full_100_year_blocks = days // DAYS_PER_100_YEARS
    if full_100_year_blocks == 4:
        full_100_year_blocks = 3
    days -= full_100_year_blocks * DAYS_PER_100_YEARS

    full_4_year_blocks, days = divmod(days, DAYS_PER_4_YEARS)

    full_years = days // DAYS_PER_YEAR
    if full_years == 4:
        full_years = 3

    if part is DatePart.YEAR:
        return (
            full_400_year_blocks * 400
            + full_100_year_blocks * 100
            + full_4_year_blocks * 4
            + full_years
            + 1
        )

    rest_days = days - full_years * DAYS_PER_YEAR
    if part is DatePart.DAY_OF_YEAR:
        return rest_days + 1

    leap = full_years == 3 and (full_4_year_blocks != 24 or full_100_year_blocks == 3)
    days_to_month = DAYS_TO_MONTH_366 if leap else DAYS_TO_MONTH_365
    month = 0
    while rest_days >= days_to_month[month]:
        month += 1
    if part is DatePart.MONTH:
        return month
    return rest_days - days_to_month[month - 1] + 1


__all__ = [
    "DatePart",
    "is_leap_year",
    "days_in_month",
    "is_valid_date",
    "date_to_ticks",
    "time_to_ticks",
    "get_date_part",
]
