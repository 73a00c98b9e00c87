"""Application-layer errors raised before any request leaves the process."""

from __future__ import annotations

from onesignal_client.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Misuse or misconfiguration detected by the library itself."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
