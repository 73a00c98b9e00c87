"""Config – client configuration, 12-factor settings and loaders."""

from onesignal_client.config.client_config import ClientConfig
from onesignal_client.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    OneSignalSettings,
    Settings,
    SettingsLoader,
)
from onesignal_client.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ClientConfig",
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "OneSignalSettings",
    "Settings",
    "SettingsLoader",
]
