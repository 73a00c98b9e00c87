"""Config settings – 12-factor env-based configuration."""
from onesignal_client.config.settings.base import Settings
from onesignal_client.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from onesignal_client.config.settings.onesignal import OneSignalSettings

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "OneSignalSettings", "Settings", "SettingsLoader"]
