"""Tick arithmetic helpers for Ticktime.

Exact unit scaling and emulation of 64-bit tick storage.
This module is not part of the public API.
"""

from __future__ import annotations

import math
from fractions import Fraction

from ticktime._internal.constants import INT64_MIN, UINT64_MAX


def exact_fraction(value: int | float) -> Fraction:
    """Return the exact rational value of a number's shortest decimal form.

    Floats are read through repr(), so 0.1 becomes exactly 1/10 rather
    than the nearest binary fraction.

    Raises:
        ValueError: If value is NaN or infinite.

    Examples:
        >>> exact_fraction(0.1)
        Fraction(1, 10)
    """
    if isinstance(value, int):
        return Fraction(value)
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"cannot convert {value!r} to ticks")
    return Fraction(repr(value))


def scale_to_ticks(value: int | float, ticks_per_unit: int) -> int:
    """Convert an amount of some unit to ticks.

    Integers scale exactly. Floats are scaled through their shortest
    decimal representation so that 0.0001 ms is exactly one tick; any
    remainder below one tick is truncated toward zero.

    Raises:
        ValueError: If value is NaN or infinite.

    Examples:
        >>> scale_to_ticks(5, 10_000)
        50000
        >>> scale_to_ticks(1.00005, 10_000)
        10000
    """
    if isinstance(value, int):
        return value * ticks_per_unit
    return int(exact_fraction(value) * ticks_per_unit)


def truncating_div(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        return -quotient
    return quotient


def truncating_mod(dividend: int, divisor: int) -> int:
    """Remainder matching truncating_div; carries the sign of the dividend."""
    return dividend - truncating_div(dividend, divisor) * divisor


def wrap_int64(value: int) -> int:
    """Wrap an integer into the signed 64-bit range (two's complement)."""
    return ((value - INT64_MIN) & UINT64_MAX) + INT64_MIN


def wrap_uint64(value: int) -> int:
    """Wrap an integer into the unsigned 64-bit range."""
    return value & UINT64_MAX


__all__ = [
    "exact_fraction",
    "scale_to_ticks",
    "truncating_div",
    "truncating_mod",
    "wrap_int64",
    "wrap_uint64",
]
