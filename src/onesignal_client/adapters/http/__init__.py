"""HTTP adapter – async JSON client over httpx."""
from onesignal_client.adapters.http.client import JsonHttpClient

__all__ = ["JsonHttpClient"]
