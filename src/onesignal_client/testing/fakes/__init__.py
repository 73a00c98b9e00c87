"""Testing fakes – in-memory stand-ins for the network-facing client."""
from onesignal_client.testing.fakes.onesignal import InMemoryOneSignalClient, RecordedRequest

__all__ = ["InMemoryOneSignalClient", "RecordedRequest"]
