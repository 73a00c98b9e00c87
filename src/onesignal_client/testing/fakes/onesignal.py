"""Testing fakes – InMemoryOneSignalClient."""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from onesignal_client.adapters.onesignal import payloads
from onesignal_client.adapters.onesignal.client import NOTIFICATIONS_PATH, PLAYERS_PATH
from onesignal_client.adapters.onesignal.payloads import Platform
from onesignal_client.config.client_config import ClientConfig

__all__ = ["InMemoryOneSignalClient", "RecordedRequest"]


@dataclass(frozen=True)
class RecordedRequest:
    method: str
    path: str
    body: dict[str, Any]


@dataclass
class InMemoryOneSignalClient:
    """Drop-in stand-in for :class:`OneSignalClient` that never touches the network.

    Builds the same request bodies as the real client and records them in
    ``requests``. Registered players get a random UUID; notifications answer
    with ``{"id": ..., "recipients": <number of player ids>}``.
    """

    config: ClientConfig = field(default_factory=lambda: ClientConfig(api_key="fake-key", app_id="fake-app"))
    requests: list[RecordedRequest] = field(default_factory=list)
    players: dict[str, str] = field(default_factory=dict)

    async def __aenter__(self) -> "InMemoryOneSignalClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        return None

    async def register_device(self, identifier: str, platform: Platform | str) -> str:
        body = payloads.registration_payload(self.config, identifier, platform)
        self._record("POST", PLAYERS_PATH, body)
        player_id = str(uuid.uuid4())
        self.players[player_id] = identifier
        return player_id

    async def edit_device(self, device_id: str, new_identifier: str) -> dict[str, Any]:
        body = payloads.device_update_payload(self.config, new_identifier)
        self._record("PUT", f"{PLAYERS_PATH}/{device_id}", body)
        self.players[device_id] = new_identifier
        return {"success": True}

    async def send_notification(self, message: str, data: Any, recipient_ids: Sequence[str]) -> dict[str, Any]:
        return self._notify(payloads.notification_payload(self.config, message, data, recipient_ids))

    async def send_raw_notification(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        return self._notify(payloads.raw_notification_payload(self.config, payload))

    async def send_override_notification(
        self,
        heading: Mapping[str, str] | None,
        message: str,
        data: Any = None,
        segments: Sequence[str] | None = None,
        badge_count: int | None = None,
        recipient_ids: Sequence[str] | None = None,
    ) -> dict[str, Any]:
        return self._notify(
            payloads.override_notification_payload(
                self.config, heading, message, data, segments, badge_count, recipient_ids
            )
        )

    def _notify(self, body: dict[str, Any]) -> dict[str, Any]:
        self._record("POST", NOTIFICATIONS_PATH, body)
        return {"id": str(uuid.uuid4()), "recipients": len(body.get("include_player_ids") or [])}

    def _record(self, method: str, path: str, body: dict[str, Any]) -> None:
        self.requests.append(RecordedRequest(method=method, path=path, body=body))

    @property
    def notifications(self) -> list[dict[str, Any]]:
        return [r.body for r in self.requests if r.path == NOTIFICATIONS_PATH]

    @property
    def count(self) -> int:
        return len(self.requests)

    def reset(self) -> None:
        self.requests.clear()
        self.players.clear()
