"""Config settings – OneSignalSettings loaded from ``ONESIGNAL_*`` variables."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from onesignal_client.config.client_config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientConfig
from onesignal_client.config.settings.base import Settings
from onesignal_client.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class OneSignalSettings(Settings):
    """Environment-driven OneSignal credentials and transport options.

    ``ONESIGNAL_API_KEY`` and ``ONESIGNAL_APP_ID`` are required; the rest
    fall back to the client defaults.
    """

    _prefix: ClassVar[str] = "ONESIGNAL"

    api_key: str
    app_id: str
    sandbox: bool = False
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    raise_for_status: bool = False

    def _validate(self) -> None:
        if self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be positive")

    def to_client_config(self) -> ClientConfig:
        return ClientConfig(
            api_key=self.api_key,
            app_id=self.app_id,
            sandbox=self.sandbox,
            base_url=self.base_url,
            timeout=self.timeout,
            raise_for_status=self.raise_for_status,
        )


__all__ = ["OneSignalSettings"]
