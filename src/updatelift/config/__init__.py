"""Configuration module using Pydantic Settings.

Usage:
    from updatelift.config import ComposerSettings, get_settings

    settings = ComposerSettings(trace_updates=True)
"""

from updatelift.config.settings import ComposerSettings, get_settings

__all__ = [
    "ComposerSettings",
    "get_settings",
]
