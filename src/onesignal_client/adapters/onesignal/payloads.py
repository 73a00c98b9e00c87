"""OneSignal adapter – request body builders.

Every builder stamps ``app_id`` from the :class:`ClientConfig`; callers never
supply it. Optional values left as ``None`` are omitted from the body rather
than sent as ``null``, except ``test_type`` which OneSignal expects as an
explicit ``null`` outside the sandbox.
"""
from __future__ import annotations

import enum
from typing import Any, Mapping, Sequence

from onesignal_client.config.client_config import ClientConfig

DEFAULT_LANGUAGE = "en"
CATCH_ALL_SEGMENT = "All"
SANDBOX_TEST_TYPE = 1


class Platform(str, enum.Enum):
    IOS = "ios"
    ANDROID = "android"


class DeviceType(enum.IntEnum):
    """OneSignal ``device_type`` codes."""

    IOS = 0
    ANDROID = 1


def device_type_for(platform: Platform | str) -> DeviceType:
    """Map a platform to its device code; anything but iOS is Android."""
    return DeviceType.IOS if platform == Platform.IOS else DeviceType.ANDROID


def _compact(body: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in body.items() if v is not None}


def _ids(recipient_ids: Sequence[str] | None) -> list[str] | None:
    return None if recipient_ids is None else list(recipient_ids)


def registration_payload(config: ClientConfig, identifier: str, platform: Platform | str) -> dict[str, Any]:
    return {
        "app_id": config.app_id,
        "device_type": int(device_type_for(platform)),
        "identifier": identifier,
        "language": DEFAULT_LANGUAGE,
        "test_type": SANDBOX_TEST_TYPE if config.sandbox else None,
    }


def device_update_payload(config: ClientConfig, new_identifier: str) -> dict[str, Any]:
    return {"app_id": config.app_id, "identifier": new_identifier}


def notification_payload(
    config: ClientConfig,
    message: str,
    data: Any,
    recipient_ids: Sequence[str] | None,
) -> dict[str, Any]:
    return _compact({
        "app_id": config.app_id,
        "include_player_ids": _ids(recipient_ids),
        "contents": {DEFAULT_LANGUAGE: message},
        "data": data,
    })


def raw_notification_payload(config: ClientConfig, payload: Mapping[str, Any]) -> dict[str, Any]:
    """Copy *payload* with ``app_id`` set; the caller's mapping is left alone."""
    body = dict(payload)
    body["app_id"] = config.app_id
    return body


def override_notification_payload(
    config: ClientConfig,
    heading: Mapping[str, str] | None,
    message: str,
    data: Any = None,
    segments: Sequence[str] | None = None,
    badge_count: int | None = None,
    recipient_ids: Sequence[str] | None = None,
) -> dict[str, Any]:
    """Build a full-override body.

    ``heading`` is a whole locale map while ``message`` only fills the
    default-locale contents.
    """
    return _compact({
        "app_id": config.app_id,
        "include_player_ids": _ids(recipient_ids),
        "heading": dict(heading) if heading is not None else None,
        "contents": {DEFAULT_LANGUAGE: message},
        "segments": list(segments) if segments else [CATCH_ALL_SEGMENT],
        "badge_count": badge_count,
        "data": data,
    })


__all__ = [
    "CATCH_ALL_SEGMENT",
    "DEFAULT_LANGUAGE",
    "SANDBOX_TEST_TYPE",
    "DeviceType",
    "Platform",
    "device_type_for",
    "device_update_payload",
    "notification_payload",
    "override_notification_payload",
    "raw_notification_payload",
    "registration_payload",
]
