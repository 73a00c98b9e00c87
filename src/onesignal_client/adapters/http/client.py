"""HTTP adapter – JsonHttpClient."""
from __future__ import annotations

import json
import logging
from typing import Any, Mapping

import httpx

from onesignal_client.kernel.errors import ExternalServiceError, FormatError

logger = logging.getLogger(__name__)


class JsonHttpClient:
    """Thin async httpx wrapper that sends and receives JSON.

    Transport failures (``httpx.HTTPError``) are not caught: the caller sees
    the original exception. A body that does not decode as JSON raises
    :class:`FormatError`. The status code is ignored unless
    ``raise_for_status`` is set, in which case a non-2xx response raises
    :class:`ExternalServiceError`.

    An injected ``client`` is used as-is, keeping its own timeout, and is
    not closed by :meth:`aclose`.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        *,
        raise_for_status: bool = False,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._raise_for_status = raise_for_status

    async def __aenter__(self) -> "JsonHttpClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def post(self, url: str, payload: Any, **kwargs: Any) -> Any:
        return await self.request("POST", url, payload, **kwargs)

    async def put(self, url: str, payload: Any, **kwargs: Any) -> Any:
        return await self.request("PUT", url, payload, **kwargs)

    async def request(
        self,
        method: str,
        url: str,
        payload: Any,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        content = json.dumps(payload, ensure_ascii=False).encode("utf-8")
        logger.debug("http.request method=%s url=%s bytes=%d", method, url, len(content))
        response = await self._client.request(method, url, content=content, headers=headers)
        logger.debug("http.response method=%s url=%s status=%d", method, url, response.status_code)
        return self._decode(method, url, response)

    def _decode(self, method: str, url: str, response: httpx.Response) -> Any:
        if self._raise_for_status and response.is_error:
            raise ExternalServiceError(
                service=url,
                message=f"HTTP {response.status_code} from {method} {url}",
                status_code=response.status_code,
                detail={"body": response.text},
            )
        try:
            return response.json()
        except ValueError as exc:
            logger.warning(
                "http.invalid_json method=%s url=%s status=%d", method, url, response.status_code
            )
            raise FormatError(
                status_code=response.status_code,
                detail={"method": method, "url": url},
                cause=exc,
            ) from exc


__all__ = ["JsonHttpClient"]
