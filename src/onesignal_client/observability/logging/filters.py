"""Observability – SensitiveFieldsFilter.

Keeps the OneSignal REST API key out of log output. Values are dropped by
key name, and any string shaped like an ``Authorization`` credential
(``Basic <key>``) is scrubbed wherever it appears, including inside the
lists OneSignal bodies carry.
"""
from __future__ import annotations

import re
from typing import Any

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "api_key", "apikey", "rest_api_key", "authorization", "token", "secret", "password",
})

_CREDENTIAL = re.compile(r"\b(Basic|Bearer)\s+\S+", re.IGNORECASE)


class SensitiveFieldsFilter:
    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = frozenset(f.lower() for f in (sensitive_fields or DEFAULT_SENSITIVE_FIELDS))

    def is_sensitive(self, key: str) -> bool:
        return key.lower() in self._fields

    def scrub(self, text: str) -> str:
        """Replace ``Basic``/``Bearer`` credentials inside free text."""
        return _CREDENTIAL.sub(lambda m: f"{m.group(1)} {self.REDACTED}", text)

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        """Redact top-level sensitive keys only."""
        return {k: (self.REDACTED if self.is_sensitive(k) else v) for k, v in data.items()}

    def redact_deep(self, data: dict[str, Any]) -> dict[str, Any]:
        return {
            k: self.REDACTED if self.is_sensitive(k) else self._redact_value(v)
            for k, v in data.items()
        }

    def _redact_value(self, value: Any) -> Any:
        if isinstance(value, dict):
            return self.redact_deep(value)
        if isinstance(value, (list, tuple)):
            return [self._redact_value(v) for v in value]
        if isinstance(value, str):
            return self.scrub(value)
        return value


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter"]
