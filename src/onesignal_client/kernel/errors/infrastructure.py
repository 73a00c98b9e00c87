"""Infrastructure errors — problems talking to the OneSignal REST API."""

from __future__ import annotations

from typing import Any

from onesignal_client.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O or protocol failure that is not a caller mistake."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class FormatError(SerializationError):
    """The HTTP exchange completed but the response body is not JSON.

    Kept apart from transport failures (``httpx.HTTPError``) so callers can
    tell a network problem from a contract violation.
    """

    default_code = "wrong_json_format"
    default_message = "Wrong JSON Format"

    def __init__(self, message: str | None = None, **kwargs: Any) -> None:
        kwargs.setdefault("payload_type", "json")
        super().__init__(message or self.default_message, **kwargs)


class ExternalServiceError(InfrastructureError):
    """OneSignal answered with a non-2xx status (only in ``raise_for_status`` mode)."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service


__all__ = [
    "ExternalServiceError",
    "FormatError",
    "InfrastructureError",
    "SerializationError",
]
