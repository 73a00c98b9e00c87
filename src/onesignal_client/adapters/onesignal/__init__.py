"""OneSignal adapter – REST client and request body builders."""
from onesignal_client.adapters.onesignal.payloads import (
    CATCH_ALL_SEGMENT,
    DEFAULT_LANGUAGE,
    DeviceType,
    Platform,
    device_type_for,
)
from onesignal_client.adapters.onesignal.client import (
    NOTIFICATIONS_PATH,
    PLAYERS_PATH,
    OneSignalClient,
    PlayerId,
    ResponseBody,
    create_client,
)

__all__ = [
    "CATCH_ALL_SEGMENT",
    "DEFAULT_LANGUAGE",
    "NOTIFICATIONS_PATH",
    "PLAYERS_PATH",
    "DeviceType",
    "OneSignalClient",
    "Platform",
    "PlayerId",
    "ResponseBody",
    "create_client",
    "device_type_for",
]
