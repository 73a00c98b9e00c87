"""Unit tests – JsonHttpClient."""
from __future__ import annotations

import asyncio
import json

import httpx
import pytest
import respx

from onesignal_client.adapters.http import JsonHttpClient
from onesignal_client.kernel.errors import ExternalServiceError, FormatError, SerializationError


class TestJsonHttpClient:
    @respx.mock
    def test_sends_utf8_json(self) -> None:
        route = respx.post("http://svc/echo").mock(return_value=httpx.Response(200, json={"ok": True}))

        async def run() -> None:
            async with JsonHttpClient() as client:
                result = await client.post("http://svc/echo", {"msg": "Привет"})
            assert result == {"ok": True}

        asyncio.run(run())
        sent = route.calls.last.request
        assert json.loads(sent.content.decode("utf-8")) == {"msg": "Привет"}

    @respx.mock
    def test_put(self) -> None:
        route = respx.put("http://svc/item/1").mock(return_value=httpx.Response(200, json=[1, 2]))

        async def run() -> None:
            async with JsonHttpClient() as client:
                assert await client.put("http://svc/item/1", {"a": 1}) == [1, 2]

        asyncio.run(run())
        assert route.called

    @respx.mock
    def test_per_request_headers(self) -> None:
        route = respx.post("http://svc/h").mock(return_value=httpx.Response(200, json={}))

        async def run() -> None:
            async with JsonHttpClient() as client:
                await client.post("http://svc/h", {}, headers={"x-test": "1"})

        asyncio.run(run())
        assert route.calls.last.request.headers["x-test"] == "1"

    @respx.mock
    def test_invalid_json_raises_format_error(self) -> None:
        respx.post("http://svc/bad").mock(return_value=httpx.Response(200, text="<html>oops</html>"))

        async def run() -> None:
            async with JsonHttpClient() as client:
                with pytest.raises(FormatError) as exc_info:
                    await client.post("http://svc/bad", {})
            err = exc_info.value
            assert isinstance(err, SerializationError)
            assert err.status_code == 200
            assert err.to_dict()["code"] == "wrong_json_format"
            assert isinstance(err.__cause__, ValueError)

        asyncio.run(run())

    @respx.mock
    def test_empty_body_raises_format_error(self) -> None:
        respx.post("http://svc/empty").mock(return_value=httpx.Response(204))

        async def run() -> None:
            async with JsonHttpClient() as client:
                with pytest.raises(FormatError):
                    await client.post("http://svc/empty", {})

        asyncio.run(run())

    @respx.mock
    def test_status_ignored_by_default(self) -> None:
        respx.post("http://svc/err").mock(return_value=httpx.Response(503, json={"errors": ["down"]}))

        async def run() -> None:
            async with JsonHttpClient() as client:
                assert await client.post("http://svc/err", {}) == {"errors": ["down"]}

        asyncio.run(run())

    @respx.mock
    def test_raise_for_status_maps_non_2xx(self) -> None:
        respx.post("http://svc/err").mock(return_value=httpx.Response(503, text="down"))

        async def run() -> None:
            async with JsonHttpClient(raise_for_status=True) as client:
                with pytest.raises(ExternalServiceError) as exc_info:
                    await client.post("http://svc/err", {})
            assert exc_info.value.status_code == 503
            assert exc_info.value.detail == {"body": "down"}
            assert exc_info.value.to_dict()["code"] == "external_service_error"

        asyncio.run(run())

    def test_transport_error_not_wrapped(self) -> None:
        error = httpx.ReadTimeout("timed out")

        def handler(request: httpx.Request) -> httpx.Response:
            raise error

        async def run() -> None:
            client = JsonHttpClient(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
            with pytest.raises(httpx.ReadTimeout) as exc_info:
                await client.post("http://svc/slow", {})
            assert exc_info.value is error

        asyncio.run(run())

    def test_injected_client_not_closed(self) -> None:
        async def run() -> None:
            inner = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, json={})))
            async with JsonHttpClient(client=inner):
                pass
            assert not inner.is_closed
            await inner.aclose()

        asyncio.run(run())

    def test_timeout_applied_to_owned_client(self) -> None:
        client = JsonHttpClient(timeout=2.5)
        assert client._client.timeout == httpx.Timeout(2.5)
        asyncio.run(client.aclose())

    def test_injected_client_keeps_its_timeout(self) -> None:
        inner = httpx.AsyncClient(timeout=30.0)
        client = JsonHttpClient(timeout=2.5, client=inner)
        assert client._client is inner
        assert inner.timeout == httpx.Timeout(30.0)
        asyncio.run(inner.aclose())

    def test_owned_client_closed(self) -> None:
        async def run() -> None:
            client = JsonHttpClient()
            await client.aclose()
            assert client._client.is_closed

        asyncio.run(run())
