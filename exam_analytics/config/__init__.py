"""Configuration package for runtime settings, logging and startup validation."""

from .logging_setup import LOGGING_STRUCTURED_FIELDS, JsonLogFormatter, config_configure_logging
from .settings import AppSettings, SettingsLoadError, config_load_database_url, config_load_settings

__all__ = [
    "AppSettings",
    "SettingsLoadError",
    "JsonLogFormatter",
    "LOGGING_STRUCTURED_FIELDS",
    "config_configure_logging",
    "config_load_settings",
    "config_load_database_url",
]
