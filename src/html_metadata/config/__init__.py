"""
Configuration module for html-metadata.

Provides Pydantic-based settings management with YAML file support
and environment variable overrides.
"""

from html_metadata.config.settings import (
    FORMAT_KEYS,
    Settings,
    ParserSettings,
    FetchSettings,
    LoggingSettings,
)
from html_metadata.config.loader import load_config, get_settings, reset_settings

__all__ = [
    "FORMAT_KEYS",
    "Settings",
    "ParserSettings",
    "FetchSettings",
    "LoggingSettings",
    "load_config",
    "get_settings",
    "reset_settings",
]
