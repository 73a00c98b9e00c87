"""Config – immutable per-client configuration."""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BASE_URL = "https://onesignal.com"
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class ClientConfig:
    """Values captured once when a client is built and read by every call.

    ``api_key`` and ``app_id`` are not validated here; a bad value only
    shows up as an error body from OneSignal.
    """

    api_key: str
    app_id: str
    sandbox: bool = False
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    raise_for_status: bool = False

    def __repr__(self) -> str:
        return (
            f"ClientConfig(app_id={self.app_id!r}, sandbox={self.sandbox!r}, "
            f"base_url={self.base_url!r})"
        )


__all__ = ["DEFAULT_BASE_URL", "DEFAULT_TIMEOUT", "ClientConfig"]
