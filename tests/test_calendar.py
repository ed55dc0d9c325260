"""Tests for the calendar conversion in ticktime._internal.calendar.

These compare the tick conversion against the standard library's proleptic
Gregorian ordinals, which share the 0001-01-01 epoch.
"""

from __future__ import annotations

import datetime as _datetime

import pytest

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
    DAYS_IN_MONTH_365,
    DAYS_IN_MONTH_366,
    DAYS_PER_100_YEARS,
    DAYS_PER_400_YEARS,
    DAYS_PER_4_YEARS,
    DAYS_TO_10000,
    DAYS_TO_1601,
    DAYS_TO_1899,
    DAYS_TO_1970,
    DAYS_TO_MONTH_365,
    DAYS_TO_MONTH_366,
    TICKS_PER_DAY,
    TICKS_PER_HOUR,
    TICKS_PER_MILLISECOND,
    TICKS_PER_MINUTE,
    TICKS_PER_SECOND,
)


def _ordinal_ticks(year: int, month: int, day: int) -> int:
    return (_datetime.date(year, month, day).toordinal() - 1) * TICKS_PER_DAY


class TestLeapYear:
    """Tests for is_leap_year."""

    @pytest.mark.parametrize(
        ("year", "expected"),
        [
            (1900, False),
            (2000, True),
            (2024, True),
            (2023, False),
            (2100, False),
            (2400, True),
            (4, True),
            (1, False),
        ],
    )
    def test_leap_year_rule(self, year: int, expected: bool) -> None:
        """Divisible by 4, except centuries not divisible by 400."""
        assert is_leap_year(year) is expected

    def test_matches_standard_library(self) -> None:
        """The rule agrees with the standard library for every year."""
        import calendar

        for year in range(1, 10000):
            assert is_leap_year(year) == calendar.isleap(year)


class TestDaysInMonth:
    """Tests for days_in_month."""

    def test_february_leap_year(self) -> None:
        assert days_in_month(2024, 2) == 29

    def test_february_common_year(self) -> None:
        assert days_in_month(2023, 2) == 28

    def test_thirty_day_months(self) -> None:
        for month in (4, 6, 9, 11):
            assert days_in_month(2023, month) == 30

    def test_invalid_month_is_zero(self) -> None:
        """An invalid month yields 0 instead of raising."""
        assert days_in_month(2024, 0) == 0
        assert days_in_month(2024, 13) == 0


class TestTables:
    """The day-count tables are consistent with each other."""

    def test_days_to_month_are_cumulative(self) -> None:
        for month in range(12):
            assert DAYS_TO_MONTH_365[month + 1] - DAYS_TO_MONTH_365[month] == DAYS_IN_MONTH_365[month]
            assert DAYS_TO_MONTH_366[month + 1] - DAYS_TO_MONTH_366[month] == DAYS_IN_MONTH_366[month]

    def test_cycle_lengths(self) -> None:
        assert DAYS_PER_4_YEARS == 4 * 365 + 1
        assert DAYS_PER_100_YEARS == 25 * DAYS_PER_4_YEARS - 1
        assert DAYS_PER_400_YEARS == 4 * DAYS_PER_100_YEARS + 1

    def test_reference_day_counts(self) -> None:
        assert date_to_ticks(1601, 1, 1) == DAYS_TO_1601 * TICKS_PER_DAY
        assert date_to_ticks(1899, 12, 30) == DAYS_TO_1899 * TICKS_PER_DAY
        assert date_to_ticks(1970, 1, 1) == DAYS_TO_1970 * TICKS_PER_DAY
        assert date_to_ticks(9999, 12, 31) + TICKS_PER_DAY == DAYS_TO_10000 * TICKS_PER_DAY

    def test_tick_units(self) -> None:
        assert TICKS_PER_MILLISECOND == 10_000
        assert TICKS_PER_SECOND == 10_000_000
        assert TICKS_PER_MINUTE == 600_000_000
        assert TICKS_PER_HOUR == 36_000_000_000
        assert TICKS_PER_DAY == 864_000_000_000


class TestDateToTicks:
    """Tests for date_to_ticks."""

    def test_epoch_is_zero(self) -> None:
        assert date_to_ticks(1, 1, 1) == 0

    def test_second_day(self) -> None:
        assert date_to_ticks(1, 1, 2) == TICKS_PER_DAY

    @pytest.mark.parametrize(
        ("year", "month", "day"),
        [
            (1, 12, 31),
            (100, 3, 1),
            (400, 12, 31),
            (1600, 2, 29),
            (1900, 3, 1),
            (2000, 2, 29),
            (2023, 12, 31),
            (2024, 7, 4),
            (9999, 12, 31),
        ],
    )
    def test_matches_ordinal(self, year: int, month: int, day: int) -> None:
        assert date_to_ticks(year, month, day) == _ordinal_ticks(year, month, day)

    @pytest.mark.parametrize(
        ("year", "month", "day"),
        [
            (2024, 13, 1),
            (2024, 0, 1),
            (2024, 1, 0),
            (2024, 1, 32),
            (2023, 2, 29),
            (1900, 2, 29),
            (0, 1, 1),
            (10000, 1, 1),
            (-1, 1, 1),
        ],
    )
    def test_invalid_date_is_null(self, year: int, month: int, day: int) -> None:
        """Invalid components resolve to tick 0 rather than raising."""
        assert date_to_ticks(year, month, day) == 0
        assert is_valid_date(year, month, day) is False


class TestGetDatePart:
    """Tests for get_date_part, the inverse of date_to_ticks."""

    @pytest.mark.parametrize("year", [1, 4, 99, 100, 101, 400, 1600, 1900, 2000, 2023, 2024, 2100, 9999])
    def test_round_trip_every_day_of_year(self, year: int) -> None:
        """Every valid date of the year survives date -> ticks -> date."""
        day_of_year = 0
        for month in range(1, 13):
            for day in range(1, days_in_month(year, month) + 1):
                day_of_year += 1
                ticks = date_to_ticks(year, month, day)
                assert get_date_part(ticks, DatePart.YEAR) == year
                assert get_date_part(ticks, DatePart.MONTH) == month
                assert get_date_part(ticks, DatePart.DAY) == day
                assert get_date_part(ticks, DatePart.DAY_OF_YEAR) == day_of_year

    def test_round_trip_sampled_range(self) -> None:
        """Sampled days across the whole range agree with the standard library."""
        for ordinal in range(1, DAYS_TO_10000 + 1, 997):
            expected = _datetime.date.fromordinal(ordinal)
            ticks = (ordinal - 1) * TICKS_PER_DAY + 5 * TICKS_PER_HOUR
            assert get_date_part(ticks, DatePart.YEAR) == expected.year
            assert get_date_part(ticks, DatePart.MONTH) == expected.month
            assert get_date_part(ticks, DatePart.DAY) == expected.day

    def test_last_day_of_leap_cycle(self) -> None:
        """The 366th day of a 400-year leap year stays in that year."""
        ticks = date_to_ticks(2000, 12, 31)
        assert get_date_part(ticks, DatePart.YEAR) == 2000
        assert get_date_part(ticks, DatePart.DAY_OF_YEAR) == 366
        assert get_date_part(ticks + TICKS_PER_DAY, DatePart.YEAR) == 2001

    def test_last_day_of_four_year_cycle(self) -> None:
        ticks = date_to_ticks(2024, 12, 31)
        assert get_date_part(ticks, DatePart.YEAR) == 2024
        assert get_date_part(ticks, DatePart.MONTH) == 12
        assert get_date_part(ticks, DatePart.DAY) == 31


class TestTimeToTicks:
    """Tests for time_to_ticks."""

    def test_summation(self) -> None:
        expected = 14 * TICKS_PER_HOUR + 30 * TICKS_PER_MINUTE + 45 * TICKS_PER_SECOND + 123 * TICKS_PER_MILLISECOND
        assert time_to_ticks(14, 30, 45, 123) == expected

    def test_unbounded_components_roll_over(self) -> None:
        assert time_to_ticks(25, 0, 0, 0) == TICKS_PER_DAY + TICKS_PER_HOUR
        assert time_to_ticks(0, 90, 0, 0) == TICKS_PER_HOUR + 30 * TICKS_PER_MINUTE

    def test_fractional_milliseconds_truncate(self) -> None:
        """Fractions below one tick are dropped, not rounded."""
        assert time_to_ticks(0, 0, 0, 0.5) == 5_000
        assert time_to_ticks(0, 0, 0, 0.00019) == 1
