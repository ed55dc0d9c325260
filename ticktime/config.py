"""Library configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default, so importing ticktime needs no environment
    - get_settings() is cached (lru_cache); call get_settings.cache_clear()
      after changing the environment

Environment variables use the TICKTIME_ prefix, e.g.
TICKTIME_COPY_BUFFER_SIZE=65536 or TICKTIME_CLOCK=fixed.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Ticktime settings from environment variables."""

    model_config = SettingsConfigDict(env_prefix="TICKTIME_", case_sensitive=False)

    # Stream copying
    copy_buffer_size: int = 4096

    # TimeSpan formatting
    timespan_always_show_days: bool = False

    # Clock used by DateTime.now() when none is passed
    clock: Literal["system", "fixed"] = "system"
    fixed_clock_nanoseconds: int = 0

    @field_validator("copy_buffer_size")
    @classmethod
    def buffer_size_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"copy_buffer_size must be positive, got {v}")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
