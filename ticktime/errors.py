"""Ticktime exception hierarchy.

All Ticktime-specific exceptions inherit from TicktimeError.

Note that an out-of-range date never raises: ``DateTime.from_date`` resolves
it to the null instant instead. Only text conversion and stream copying
surface errors to the caller.
"""

from __future__ import annotations


class TicktimeError(Exception):
    """Base exception for all Ticktime errors."""

    pass


class ConversionError(TicktimeError, ValueError):
    """Failed to convert a value from or to its textual form.

    Raised when a string does not match the expected grammar.

    Examples:
        - "2024-01-15X" passed to DateTime.from_string
        - "1.2.3" passed to TimeSpan.from_string
        - "12a" passed to string_to_number
    """

    def __init__(self, message: str = "unable to convert") -> None:
        super().__init__(message)


class IoError(TicktimeError):
    """A stream did not deliver the requested number of bytes."""

    pass


__all__ = [
    "TicktimeError",
    "ConversionError",
    "IoError",
]
