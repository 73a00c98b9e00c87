"""OneSignal adapter – OneSignalClient."""
from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence
from urllib.parse import quote

import httpx

from onesignal_client.adapters.http.client import JsonHttpClient
from onesignal_client.adapters.onesignal import payloads
from onesignal_client.adapters.onesignal.payloads import Platform
from onesignal_client.config.client_config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientConfig
from onesignal_client.config.settings import EnvSettingsLoader, OneSignalSettings, SettingsLoader

logger = logging.getLogger(__name__)

PLAYERS_PATH = "/api/v1/players"
NOTIFICATIONS_PATH = "/api/v1/notifications"

PlayerId = str
ResponseBody = Any


def request_headers(api_key: str) -> dict[str, str]:
    return {
        "authorization": f"Basic {api_key}",
        "cache-control": "no-cache",
        "content-type": "application/json; charset=utf-8",
    }


class OneSignalClient:
    """Async wrapper around the OneSignal REST API.

    Each operation performs exactly one HTTP request and either returns the
    decoded JSON body or raises. Transport failures surface as the original
    ``httpx.HTTPError``; a non-JSON body raises
    :class:`~onesignal_client.kernel.errors.FormatError`. JSON error bodies
    from OneSignal are returned like any other body unless the client was
    built with ``raise_for_status=True``.

    ``timeout`` configures the ``httpx.AsyncClient`` the wrapper creates for
    itself. When ``http_client`` is injected, that client is used as-is:
    its own timeout applies, ``timeout`` is only recorded on
    :attr:`config`, and the client is left open by :meth:`aclose`.

    Usage::

        async with OneSignalClient("rest-api-key", "app-id") as onesignal:
            player_id = await onesignal.register_device(token, "ios")
            await onesignal.send_notification("Hello", {"k": "v"}, [player_id])
    """

    def __init__(
        self,
        api_key: str,
        app_id: str,
        sandbox: bool = False,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        raise_for_status: bool = False,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = ClientConfig(
            api_key=api_key,
            app_id=app_id,
            sandbox=sandbox,
            base_url=base_url,
            timeout=timeout,
            raise_for_status=raise_for_status,
        )
        self._headers = request_headers(api_key)
        self._http = JsonHttpClient(
            timeout=timeout,
            raise_for_status=raise_for_status,
            client=http_client,
        )

    @classmethod
    def from_config(
        cls, config: ClientConfig, *, http_client: httpx.AsyncClient | None = None
    ) -> "OneSignalClient":
        return cls(
            config.api_key,
            config.app_id,
            config.sandbox,
            base_url=config.base_url,
            timeout=config.timeout,
            raise_for_status=config.raise_for_status,
            http_client=http_client,
        )

    @classmethod
    def from_settings(
        cls,
        settings: OneSignalSettings | None = None,
        *,
        loader: SettingsLoader | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> "OneSignalClient":
        """Build a client from :class:`OneSignalSettings`, loading them from
        the environment when not given."""
        if settings is None:
            settings = (loader or EnvSettingsLoader()).load(OneSignalSettings)
        return cls.from_config(settings.to_client_config(), http_client=http_client)

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def __aenter__(self) -> "OneSignalClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    # ------------------------------------------------------------------
    # Players
    # ------------------------------------------------------------------

    async def register_device(self, identifier: str, platform: Platform | str) -> PlayerId | None:
        """Register a device token and return the OneSignal player id.

        ``platform`` is ``"ios"`` or ``"android"``; any other value is sent
        with the Android device code. Returns ``None`` when the response
        body carries no ``id`` (e.g. an error body).
        """
        body = await self._http.post(
            self._url(PLAYERS_PATH),
            payloads.registration_payload(self._config, identifier, platform),
            headers=self._headers,
        )
        player_id = body.get("id") if isinstance(body, dict) else None
        logger.debug("onesignal.device_registered player_id=%s", player_id)
        return player_id

    async def edit_device(self, device_id: PlayerId, new_identifier: str) -> ResponseBody:
        """Replace the push token of an existing player; returns the full body."""
        return await self._http.put(
            self._url(f"{PLAYERS_PATH}/{quote(device_id, safe='')}"),
            payloads.device_update_payload(self._config, new_identifier),
            headers=self._headers,
        )

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    async def send_notification(
        self, message: str, data: Any, recipient_ids: Sequence[PlayerId]
    ) -> ResponseBody:
        """Send ``message`` (default locale) with ``data`` to the given players."""
        return await self._send(payloads.notification_payload(self._config, message, data, recipient_ids))

    async def send_raw_notification(self, payload: Mapping[str, Any]) -> ResponseBody:
        """Send a hand-built notification body; only ``app_id`` is overwritten."""
        return await self._send(payloads.raw_notification_payload(self._config, payload))

    async def send_override_notification(
        self,
        heading: Mapping[str, str] | None,
        message: str,
        data: Any = None,
        segments: Sequence[str] | None = None,
        badge_count: int | None = None,
        recipient_ids: Sequence[PlayerId] | None = None,
    ) -> ResponseBody:
        """Send a notification with heading, segments and badge count.

        Missing or empty ``segments`` target the ``"All"`` segment.
        """
        return await self._send(
            payloads.override_notification_payload(
                self._config, heading, message, data, segments, badge_count, recipient_ids
            )
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _send(self, body: dict[str, Any]) -> ResponseBody:
        result = await self._http.post(self._url(NOTIFICATIONS_PATH), body, headers=self._headers)
        if isinstance(result, dict):
            logger.debug(
                "onesignal.notification_sent id=%s recipients=%s",
                result.get("id"),
                result.get("recipients"),
            )
        return result

    def _url(self, path: str) -> str:
        return f"{self._config.base_url.rstrip('/')}{path}"


def create_client(api_key: str, app_id: str, sandbox: bool = False) -> OneSignalClient:
    """Return a new, independently configured :class:`OneSignalClient`."""
    return OneSignalClient(api_key, app_id, sandbox)


__all__ = [
    "NOTIFICATIONS_PATH",
    "PLAYERS_PATH",
    "OneSignalClient",
    "PlayerId",
    "ResponseBody",
    "create_client",
    "request_headers",
]
