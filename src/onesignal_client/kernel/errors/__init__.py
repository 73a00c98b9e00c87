"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError       (application.py)
    │   └── ConfigError        (config.validation)
    └── InfrastructureError    (infrastructure.py)
        ├── SerializationError
        │   └── FormatError
        └── ExternalServiceError

Transport failures are not wrapped: they reach the caller as the original
``httpx.HTTPError``.
"""

from onesignal_client.kernel.errors.application import ApplicationError
from onesignal_client.kernel.errors.base import BaseError
from onesignal_client.kernel.errors.infrastructure import (
    ExternalServiceError,
    FormatError,
    InfrastructureError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ExternalServiceError",
    "FormatError",
    "InfrastructureError",
    "SerializationError",
]
