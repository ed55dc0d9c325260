"""Tests for the public import surface."""

from __future__ import annotations

import logging

import ticktime


def test_all_names_exported() -> None:
    for name in ticktime.__all__:
        assert hasattr(ticktime, name), name


def test_version() -> None:
    assert ticktime.__version__ == "0.1.0"


def test_error_hierarchy() -> None:
    assert issubclass(ticktime.ConversionError, ticktime.TicktimeError)
    assert issubclass(ticktime.ConversionError, ValueError)
    assert issubclass(ticktime.IoError, ticktime.TicktimeError)


def test_conversion_error_default_message() -> None:
    assert str(ticktime.ConversionError()) == "unable to convert"


def test_library_logger_has_null_handler() -> None:
    handlers = logging.getLogger("ticktime").handlers
    assert any(isinstance(handler, logging.NullHandler) for handler in handlers)


def test_subpackages_import() -> None:
    from ticktime import clock, config, conversion, format, io, units

    assert conversion.split_string
    assert format.parse_timespan
    assert io.CopyHelper
    assert units.DayOfWeek
    assert clock.FixedClock
    assert config.Settings


def test_calendar_functions() -> None:
    assert ticktime.is_leap_year(2024)
    assert ticktime.days_in_month(2024, 2) == 29
