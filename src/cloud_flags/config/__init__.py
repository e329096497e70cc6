"""Config – 12-factor settings, loaders, and configuration sources."""

from cloud_flags.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from cloud_flags.config.source import ConfigurationSource, get_value
from cloud_flags.config.validation import ConfigError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "ConfigurationSource",
    "EnvSettingsLoader",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "get_value",
]
