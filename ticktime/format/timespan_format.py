"""TimeSpan formatting and parsing.

Functions:
    format_timespan: Render a TimeSpan as ``[-]d.hh:mm:ss[.fff]`` or with
        unit measures.
    parse_timespan: Parse the ``[-]d.hh:mm:ss[.f]`` form or a
        separator-delimited list of 1-4 numbers.

Examples:
    >>> from ticktime import TimeSpan
    >>> format_timespan(TimeSpan.from_parts(hours=26, milliseconds=5))
    '1.02:00:00.005'
    >>> parse_timespan("-0:30").total_seconds
    -30.0
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from ticktime._internal.constants import (
    TICKS_PER_DAY,
    TICKS_PER_HOUR,
    TICKS_PER_MILLISECOND,
    TICKS_PER_MINUTE,
    TICKS_PER_SECOND,
)
from ticktime.config import get_settings
from ticktime.conversion.stringconversion import join_strings, string_to_number
from ticktime.errors import ConversionError
from ticktime.units.outputformat import TimeSpanOutputFormat

if TYPE_CHECKING:
    from ticktime.core.timespan import TimeSpan

logger = logging.getLogger(__name__)

_INTEGER_PART = re.compile(r"\d+")
_SECONDS_PART = re.compile(r"(?P<whole>\d+)(?:\.(?P<fraction>\d+))?")

# Unit of each part, counted from the right: s, m:s, h:m:s, d:h:m:s
_PART_UNITS = (TICKS_PER_SECOND, TICKS_PER_MINUTE, TICKS_PER_HOUR, TICKS_PER_DAY)

# Decimal places of one tick within a second
_TICK_DIGITS = 7


def format_timespan(
    span: TimeSpan,
    format: TimeSpanOutputFormat = TimeSpanOutputFormat.NORMAL,
    no_milliseconds: bool = False,
    *,
    always_show_days: bool | None = None,
) -> str:
    """Format a TimeSpan.

    Args:
        span: The span to format.
        format: The output layout.
        no_milliseconds: Suppress milliseconds.
        always_show_days: Keep the day segment of NORMAL output when it is
            zero. None uses the configured default.

    Returns:
        The formatted span.

    Examples:
        >>> from ticktime import TimeSpan
        >>> format_timespan(TimeSpan.from_seconds(-90))
        '-00:01:30'
        >>> format_timespan(TimeSpan.from_seconds(-90), always_show_days=True)
        '-0.00:01:30'
        >>> format_timespan(TimeSpan(), TimeSpanOutputFormat.WITH_MEASURES)
        '0 s'
    """
    if format is TimeSpanOutputFormat.WITH_MEASURES:
        return _format_with_measures(span, no_milliseconds)

    if always_show_days is None:
        always_show_days = get_settings().timespan_always_show_days

    sign = "-" if span.is_negative else ""
    magnitude = abs(span.total_ticks)
    days = magnitude // TICKS_PER_DAY
    hours = magnitude // TICKS_PER_HOUR % 24
    minutes = magnitude // TICKS_PER_MINUTE % 60
    seconds = magnitude // TICKS_PER_SECOND % 60
    milliseconds = magnitude // TICKS_PER_MILLISECOND % 1000

    result = f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    if days or always_show_days:
        result = f"{days}.{result}"
    if milliseconds and not no_milliseconds:
        result += f".{milliseconds:03d}"
    return sign + result


def _format_with_measures(span: TimeSpan, no_milliseconds: bool) -> str:
    if span.is_null:
        return "0 s"
    magnitude = abs(span.total_ticks)
    sign = "-" if span.is_negative else ""
    if magnitude < TICKS_PER_MILLISECOND:
        # ticks are tenths of a microsecond
        return f"{sign}{magnitude / 10:g} µs"

    measures = (
        (magnitude // TICKS_PER_DAY, "d"),
        (magnitude // TICKS_PER_HOUR % 24, "h"),
        (magnitude // TICKS_PER_MINUTE % 60, "min"),
        (magnitude // TICKS_PER_SECOND % 60, "s"),
        (0 if no_milliseconds else magnitude // TICKS_PER_MILLISECOND % 1000, "ms"),
    )
    result = join_strings((f"{value} {unit}" for value, unit in measures if value), " ")
    if not result:
        # only milliseconds, suppressed
        return "0 s"
    return sign + result


def parse_timespan(text: str, separator: str = ":") -> TimeSpan:
    """Parse a TimeSpan.

    Grammar::

        [-|+] [days "."] h sep m sep s ["." fraction]
        [-|+] number (sep number){0,3}        # s / m:s / h:m:s / d:h:m:s

    Only the trailing seconds part may carry a fraction; digits beyond
    one tick (seven decimal places) are truncated. Parts are summed
    without range checks, so "0:90" is one minute and thirty seconds.

    Args:
        text: The text to parse. Surrounding whitespace is ignored.
        separator: The separator between parts.

    Returns:
        The parsed TimeSpan.

    Raises:
        ConversionError: If text does not match the grammar.
        ValueError: If separator is empty or contains digits or a dot.
    """
    from ticktime.core.timespan import TimeSpan

    if not separator or "." in separator or any(c.isdigit() for c in separator):
        raise ValueError(f"invalid separator {separator!r}")

    body = text.strip()
    negative = body.startswith("-")
    if body[:1] in ("-", "+"):
        body = body[1:]
    if not body:
        logger.debug("cannot parse empty time span %r", text)
        raise ConversionError(f"empty time span: {text!r}")

    days = 0
    first_separator = body.find(separator)
    first_dot = body.find(".")
    if first_separator >= 0 and 0 <= first_dot < first_separator:
        day_text, body = body[:first_dot], body[first_dot + 1 :]
        days = _parse_integer_part(day_text, text)
        parts = body.split(separator)
        if len(parts) != 3:
            logger.debug("day-prefixed time span %r is not d.h:m:s", text)
            raise ConversionError(f"expected d.hh:mm:ss, got {text!r}")
    else:
        parts = body.split(separator)
        if len(parts) > 4:
            logger.debug("time span %r has more than four parts", text)
            raise ConversionError(f"too many parts in time span: {text!r}")

    ticks = days * TICKS_PER_DAY + _parse_seconds_part(parts[-1], text)
    for unit, part in zip(_PART_UNITS[1:], reversed(parts[:-1])):
        ticks += _parse_integer_part(part, text) * unit

    return TimeSpan(-ticks if negative else ticks)


def _parse_integer_part(part: str, text: str) -> int:
    if not _INTEGER_PART.fullmatch(part):
        logger.debug("malformed segment %r in time span %r", part, text)
        raise ConversionError(f"malformed segment {part!r} in time span {text!r}")
    return string_to_number(part)


def _parse_seconds_part(part: str, text: str) -> int:
    match = _SECONDS_PART.fullmatch(part)
    if match is None:
        logger.debug("malformed seconds %r in time span %r", part, text)
        raise ConversionError(f"malformed seconds {part!r} in time span {text!r}")
    ticks = string_to_number(match["whole"]) * TICKS_PER_SECOND
    fraction = match["fraction"]
    if fraction:
        ticks += string_to_number(fraction[:_TICK_DIGITS].ljust(_TICK_DIGITS, "0"))
    return ticks


__all__ = ["format_timespan", "parse_timespan"]
