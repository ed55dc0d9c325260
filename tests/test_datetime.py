"""Tests for the DateTime class."""

from __future__ import annotations

import datetime as _datetime

import pytest

from ticktime import DateTime, DayOfWeek, TimeSpan
from ticktime._internal.constants import TICKS_PER_DAY, TICKS_PER_HOUR, UINT64_MAX
from ticktime.clock import FixedClock


class TestDateTimeConstruction:
    """Test DateTime construction."""

    def test_default_is_null(self) -> None:
        dt = DateTime()
        assert dt.is_null
        assert dt.total_ticks == 0

    def test_from_ticks(self) -> None:
        assert DateTime(TICKS_PER_DAY).day == 2

    def test_non_integer_ticks_rejected(self) -> None:
        with pytest.raises(TypeError):
            DateTime("0")  # type: ignore[arg-type]

    def test_from_date(self) -> None:
        dt = DateTime.from_date(2024, 1, 15)
        assert dt.year == 2024
        assert dt.month == 1
        assert dt.day == 15
        assert dt.hour == 0
        assert dt.time_of_day.is_null

    def test_from_date_defaults_to_epoch(self) -> None:
        """The epoch date is indistinguishable from null."""
        assert DateTime.from_date().is_null

    @pytest.mark.parametrize(
        ("year", "month", "day"),
        [(2024, 13, 1), (2024, 1, 0), (2023, 2, 29), (0, 1, 1), (10000, 1, 1)],
    )
    def test_from_date_invalid_is_null(self, year: int, month: int, day: int) -> None:
        """Invalid dates resolve to the null instant and never raise."""
        dt = DateTime.from_date(year, month, day)
        assert dt.is_null
        assert dt.total_ticks == 0

    def test_try_from_date(self) -> None:
        assert DateTime.try_from_date(2024, 13, 1) is None
        epoch = DateTime.try_from_date(1, 1, 1)
        assert epoch is not None
        assert epoch.total_ticks == 0
        assert DateTime.try_from_date(2024, 2, 29) == DateTime.from_date(2024, 2, 29)

    def test_from_time(self) -> None:
        dt = DateTime.from_time(14, 30, 45, 123)
        assert dt.hour == 14
        assert dt.minute == 30
        assert dt.second == 45
        assert dt.millisecond == 123

    def test_from_time_rolls_over(self) -> None:
        """Out-of-range components roll into higher-order ticks."""
        dt = DateTime.from_time(hour=25, minute=61)
        assert dt.total_ticks == 26 * TICKS_PER_HOUR + 600_000_000
        assert dt.day == 2
        assert dt.hour == 2
        assert dt.minute == 1

    def test_from_date_and_time(self) -> None:
        dt = DateTime.from_date_and_time(2024, 1, 15, 14, 30, 45, 500)
        assert (dt.year, dt.month, dt.day) == (2024, 1, 15)
        assert (dt.hour, dt.minute, dt.second, dt.millisecond) == (14, 30, 45, 500)
        assert dt.total_ticks == DateTime.from_date(2024, 1, 15).total_ticks + DateTime.from_time(14, 30, 45, 500).total_ticks

    def test_from_date_and_time_invalid_date_is_null(self) -> None:
        """A null date makes the whole result null, whatever the time."""
        assert DateTime.from_date_and_time(2024, 2, 30, 12, 0, 0).is_null

    def test_from_timestamp(self) -> None:
        assert DateTime.from_timestamp(0) == DateTime.unix_epoch_start()
        assert DateTime.unix_epoch_start() == DateTime.from_date(1970, 1, 1)
        dt = DateTime.from_timestamp(1_705_329_045)
        assert dt == DateTime.from_date_and_time(2024, 1, 15, 14, 30, 45)

    def test_from_timestamp_out_of_range_is_null(self) -> None:
        assert DateTime.from_timestamp(-62_135_596_801).is_null
        assert DateTime.from_timestamp(253_402_300_800).is_null
        assert DateTime.from_timestamp(253_402_300_799).year == 9999

    def test_from_timestamp_non_finite_rejected(self) -> None:
        with pytest.raises(ValueError):
            DateTime.from_timestamp(float("nan"))


class TestDateTimeNow:
    """Tests for DateTime.now with an injected clock."""

    def test_now_reads_injected_clock(self, fixed_clock: FixedClock) -> None:
        dt = DateTime.now(fixed_clock)
        assert dt == DateTime.from_date_and_time(2024, 1, 15, 14, 30, 45, 123)

    def test_now_reads_clock_once_per_call(self, fixed_clock: FixedClock) -> None:
        first = DateTime.now(fixed_clock)
        fixed_clock.advance(1_000_000_000)
        second = DateTime.now(fixed_clock)
        assert second - first == TimeSpan.from_seconds(1)

    def test_now_uses_configured_fixed_clock(self, settings_env) -> None:
        settings_env(clock="fixed", fixed_clock_nanoseconds="0")
        assert DateTime.now() == DateTime.unix_epoch_start()

    def test_now_system_clock_is_recent(self, settings_env) -> None:
        settings_env(clock="system")
        now = DateTime.now()
        assert now.year >= 2024
        assert not now.is_null


class TestDateTimeFields:
    """Tests for derived fields."""

    def test_time_fields(self) -> None:
        dt = DateTime.from_date_and_time(2024, 6, 30, 23, 59, 59, 999)
        assert dt.hour == 23
        assert dt.minute == 59
        assert dt.second == 59
        assert dt.millisecond == 999

    def test_day_of_year(self) -> None:
        assert DateTime.from_date(2024, 1, 1).day_of_year == 1
        assert DateTime.from_date(2024, 3, 1).day_of_year == 61
        assert DateTime.from_date(2023, 3, 1).day_of_year == 60
        assert DateTime.from_date(2024, 12, 31).day_of_year == 366

    def test_time_of_day(self) -> None:
        dt = DateTime.from_date_and_time(2024, 1, 15, 6, 30)
        assert dt.time_of_day == TimeSpan.from_parts(hours=6, minutes=30)

    def test_leap_year(self) -> None:
        assert DateTime.from_date(2024, 5, 1).is_leap_year
        assert not DateTime.from_date(2023, 5, 1).is_leap_year
        assert DateTime.is_leap_year_of(2000)
        assert not DateTime.is_leap_year_of(1900)

    def test_days_in_month(self) -> None:
        assert DateTime.days_in_month(2024, 2) == 29
        assert DateTime.days_in_month(2023, 2) == 28
        assert DateTime.days_in_month(2023, 13) == 0

    def test_is_same_day(self) -> None:
        morning = DateTime.from_date_and_time(2024, 1, 15, 0, 0, 0)
        evening = DateTime.from_date_and_time(2024, 1, 15, 23, 59, 59)
        tomorrow = DateTime.from_date(2024, 1, 16)
        assert morning.is_same_day(evening)
        assert not evening.is_same_day(tomorrow)


class TestDayOfWeek:
    """Weekday anchoring against known dates."""

    def test_epoch_is_monday(self) -> None:
        assert DateTime().day_of_week is DayOfWeek.MONDAY

    @pytest.mark.parametrize(
        ("year", "month", "day", "expected"),
        [
            (1969, 7, 20, DayOfWeek.SUNDAY),  # Apollo 11 landing
            (1970, 1, 1, DayOfWeek.THURSDAY),
            (2000, 1, 1, DayOfWeek.SATURDAY),
            (2001, 9, 11, DayOfWeek.TUESDAY),
            (2024, 1, 15, DayOfWeek.MONDAY),
            (2024, 2, 29, DayOfWeek.THURSDAY),
        ],
    )
    def test_known_dates(self, year: int, month: int, day: int, expected: DayOfWeek) -> None:
        assert DateTime.from_date(year, month, day).day_of_week is expected

    def test_matches_standard_library(self) -> None:
        for ordinal in range(1, 3_652_059, 7919):
            date = _datetime.date.fromordinal(ordinal)
            dt = DateTime.from_date(date.year, date.month, date.day)
            assert dt.day_of_week.value == date.weekday()

    def test_print_day_of_week(self) -> None:
        assert DateTime.print_day_of_week(DayOfWeek.WEDNESDAY) == "Wednesday"
        assert DateTime.print_day_of_week(DayOfWeek.WEDNESDAY, abbreviation=True) == "Wed"


class TestDateTimeArithmetic:
    """Tests for DateTime operators."""

    def test_year_difference(self) -> None:
        """2023 is not a leap year, so it is exactly 365 days long."""
        span = DateTime.from_date(2024, 1, 1) - DateTime.from_date(2023, 1, 1)
        assert span == TimeSpan.from_days(365)
        assert span.days == 365

    def test_leap_year_difference(self) -> None:
        span = DateTime.from_date(2025, 1, 1) - DateTime.from_date(2024, 1, 1)
        assert span.days == 366

    def test_add_timespan(self) -> None:
        dt = DateTime.from_date(2024, 2, 28) + TimeSpan.from_days(1)
        assert (dt.month, dt.day) == (2, 29)
        dt = TimeSpan.from_days(2) + DateTime.from_date(2024, 2, 28)
        assert (dt.month, dt.day) == (3, 1)

    def test_sub_timespan(self) -> None:
        dt = DateTime.from_date(2024, 1, 1) - TimeSpan.from_hours(1)
        assert (dt.year, dt.month, dt.day, dt.hour) == (2023, 12, 31, 23)

    def test_negative_difference(self) -> None:
        span = DateTime.from_date(2023, 1, 1) - DateTime.from_date(2024, 1, 1)
        assert span.days == -365

    def test_add_datetimes_sums_ticks(self) -> None:
        a, b = DateTime(5), DateTime(7)
        assert a + b == TimeSpan(12)

    def test_compound_assignment(self) -> None:
        dt = DateTime.from_date(2024, 1, 1)
        dt += TimeSpan.from_days(31)
        assert dt == DateTime.from_date(2024, 2, 1)
        dt -= TimeSpan.from_days(1)
        assert dt == DateTime.from_date(2024, 1, 31)

    def test_underflow_wraps(self) -> None:
        """Unsigned ticks wrap around instead of raising."""
        assert (DateTime() - TimeSpan(1)).total_ticks == UINT64_MAX

    def test_unsupported_operand(self) -> None:
        with pytest.raises(TypeError):
            DateTime() + 1  # type: ignore[operator]


class TestDateTimeComparison:
    """Ordering is consistent with tick comparison."""

    def test_ordering_matches_ticks(self) -> None:
        dates = [
            DateTime.from_date(2024, 1, 15),
            DateTime.from_date(1999, 12, 31),
            DateTime.from_date_and_time(2024, 1, 15, 0, 0, 0, 1),
            DateTime(),
        ]
        for a in dates:
            for b in dates:
                assert (a < b) == (a.total_ticks < b.total_ticks)
                assert (a <= b) == (a.total_ticks <= b.total_ticks)
                assert (a > b) == (a.total_ticks > b.total_ticks)
                assert (a >= b) == (a.total_ticks >= b.total_ticks)
                assert (a == b) == (a.total_ticks == b.total_ticks)
                assert (a != b) == (a.total_ticks != b.total_ticks)

    def test_hashable(self) -> None:
        assert len({DateTime.from_date(2024, 1, 1), DateTime.from_date(2024, 1, 1)}) == 1

    def test_not_equal_to_timespan(self) -> None:
        assert DateTime(5) != TimeSpan(5)

    def test_bool_is_not_null(self) -> None:
        assert not DateTime()
        assert DateTime.from_date(2024, 1, 1)

    def test_repr(self) -> None:
        assert repr(DateTime(42)) == "DateTime(42)"
