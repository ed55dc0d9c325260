"""Pytest configuration and fixtures for Ticktime tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so ticktime can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from ticktime.clock import FixedClock  # noqa: E402
from ticktime.config import get_settings  # noqa: E402

# 2024-01-15 14:30:45.123 UTC
FIXED_UNIX_NANOSECONDS = 1_705_329_045_123_000_000


@pytest.fixture
def fixed_clock() -> FixedClock:
    """A clock frozen at 2024-01-15 14:30:45.123 UTC."""
    return FixedClock(FIXED_UNIX_NANOSECONDS)


@pytest.fixture
def settings_env(monkeypatch: pytest.MonkeyPatch):
    """Set TICKTIME_* variables for one test with a fresh settings cache."""

    def apply(**values: str) -> None:
        for name, value in values.items():
            monkeypatch.setenv(f"TICKTIME_{name.upper()}", value)
        get_settings.cache_clear()

    get_settings.cache_clear()
    yield apply
    get_settings.cache_clear()
