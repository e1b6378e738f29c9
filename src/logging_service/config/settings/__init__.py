"""Config settings – 12-factor env-based configuration."""
from logging_service.config.settings.base import Settings
from logging_service.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
