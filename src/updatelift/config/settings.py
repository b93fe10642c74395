"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the
update tracing layer. The combinators themselves never read settings.

Usage:
    from updatelift.config import ComposerSettings, get_settings

    # Load from environment variables (UPDATELIFT_*)
    settings = get_settings()

    # Or override with explicit values
    settings = ComposerSettings(trace_updates=True, log_level="DEBUG")
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ComposerSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for update tracing.

    Attributes:
        trace_updates: Log every call of a `traced` update function.
        log_level: Level of the `updatelift` logger (DEBUG, INFO, ...).
        log_effect_items: Include effect reprs in trace lines, not just counts.

    Environment Variables:
        UPDATELIFT_TRACE_UPDATES
        UPDATELIFT_LOG_LEVEL
        UPDATELIFT_LOG_EFFECT_ITEMS
    """

    model_config = SettingsConfigDict(
        env_prefix="UPDATELIFT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    trace_updates: bool = False
    log_level: str = "WARNING"
    log_effect_items: bool = False

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> ComposerSettings:
    """Process-wide settings, read from the environment once."""
    return ComposerSettings()
