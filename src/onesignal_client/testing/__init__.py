"""Testing helpers for applications that depend on onesignal-client."""
from onesignal_client.testing.fakes import InMemoryOneSignalClient, RecordedRequest

__all__ = ["InMemoryOneSignalClient", "RecordedRequest"]
