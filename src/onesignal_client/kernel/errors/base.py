"""Root error class for the onesignal-client error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of every error this library raises itself.

    ``httpx`` transport errors are never wrapped in a :class:`BaseError`;
    everything here describes either a misconfigured client or a response
    OneSignal sent that the client could not accept.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context such as the request method and URL.
        cause: Exception that triggered this error, also set as ``__cause__``.
        status_code: HTTP status of the OneSignal response involved, if any.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail) if detail else {}
        self.status_code = status_code
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def from_response(self) -> bool:
        """True when the error was raised while handling an HTTP response."""
        return self.status_code is not None

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        if self.status_code is None:
            return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"
        return (
            f"{type(self).__name__}(code={self.code!r}, message={self.message!r}, "
            f"status_code={self.status_code})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain dict for log records and API error envelopes."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.status_code is not None:
            payload["status_code"] = self.status_code
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
