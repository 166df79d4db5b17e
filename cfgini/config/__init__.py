"""Module de configuration."""

from cfgini.config.loader import ConfigLoader, FileConfigLoader
from cfgini.config.settings import (
    CliSettings,
    LoggingSettings,
    Settings,
    find_settings_file,
    load_settings,
)

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "CliSettings",
    "LoggingSettings",
    "Settings",
    "find_settings_file",
    "load_settings",
]
