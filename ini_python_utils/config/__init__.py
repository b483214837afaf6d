"""Module de configuration."""

from ini_python_utils.config.loader import (
    ConfigLoader,
    FileConfigLoader,
)
from ini_python_utils.config.settings import (
    IniFileSettings,
    LoggingSettings,
    SettingsFile,
    IniSettingsLoader,
)

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "IniFileSettings",
    "LoggingSettings",
    "SettingsFile",
    "IniSettingsLoader",
]
