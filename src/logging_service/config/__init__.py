"""Config – 12-factor settings, loaders, and configuration errors."""

from logging_service.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from logging_service.config.validation import (
    ConfigError,
    ConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "ConfigurationError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
