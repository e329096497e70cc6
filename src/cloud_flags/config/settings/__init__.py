"""Config settings – 12-factor env-based configuration."""
from cloud_flags.config.settings.base import Settings
from cloud_flags.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
