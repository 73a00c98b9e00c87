"""
onesignal_client – async wrapper for the OneSignal push-notification REST API.

Import path convention::

    from onesignal_client import OneSignalClient, create_client
    from onesignal_client.kernel.errors import FormatError
    from onesignal_client.config import OneSignalSettings
    from onesignal_client.observability.logging import JsonLoggerFactory
"""

from onesignal_client.adapters.onesignal import OneSignalClient, Platform, create_client
from onesignal_client.config import ClientConfig, OneSignalSettings
from onesignal_client.kernel.errors import ExternalServiceError, FormatError

__version__ = "0.1.0"
__all__ = [
    "ClientConfig",
    "ExternalServiceError",
    "FormatError",
    "OneSignalClient",
    "OneSignalSettings",
    "Platform",
    "__version__",
    "create_client",
]
