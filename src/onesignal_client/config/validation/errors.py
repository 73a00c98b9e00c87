"""Config validation errors raised while loading ``OneSignalSettings``."""
from onesignal_client.kernel.errors import ApplicationError

_SECRET_MARKERS = ("KEY", "SECRET", "TOKEN", "PASSWORD")
_MASK = "***"


def _is_secret(setting_name: str) -> bool:
    upper = setting_name.upper()
    return any(marker in upper for marker in _SECRET_MARKERS)


class ConfigError(ApplicationError):
    """The client could not be configured from settings."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required setting, such as ``ONESIGNAL_API_KEY``, is not set."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing; "
            "export it or add it to the .env file",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but its value cannot be used.

    Values of credential settings (names containing ``KEY``, ``SECRET``,
    ``TOKEN`` or ``PASSWORD``) are masked in the message and ``detail``;
    the raw value stays available on :attr:`value`.
    """
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        shown = _MASK if _is_secret(setting_name) else repr(value)
        super().__init__(
            f"Setting '{setting_name}' has invalid value {shown}: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
