"""Internal utilities for Ticktime.

This module contains private implementation details:
    - Tick constants and calendar tables
    - Date <-> tick conversion
    - 64-bit wrapping and unit scaling helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from ticktime._internal.calendar import (
    DatePart,
    date_to_ticks,
    days_in_month,
    get_date_part,
    is_leap_year,
    is_valid_date,
    time_to_ticks,
)
from ticktime._internal.ticks import scale_to_ticks, wrap_int64, wrap_uint64

__all__: list[str] = [
    "DatePart",
    "date_to_ticks",
    "days_in_month",
    "get_date_part",
    "is_leap_year",
    "is_valid_date",
    "time_to_ticks",
    "scale_to_ticks",
    "wrap_int64",
    "wrap_uint64",
]
