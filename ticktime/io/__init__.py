"""Stream helpers."""

from __future__ import annotations

from ticktime.io.copy import CopyHelper

__all__: list[str] = ["CopyHelper"]
