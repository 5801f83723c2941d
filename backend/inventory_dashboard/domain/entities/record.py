"""One record held by the remote Living Apps store."""

import math
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Record:
    """A single entity instance in a remote collection.

    The identifier and timestamps are assigned by the store; ``fields`` is a
    schema-less bag in which every key may be missing.
    """

    record_id: str
    created_at: str | None = None
    updated_at: str | None = None
    fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, record_id: str, payload: dict[str, Any]) -> "Record":
        """Build a record from a raw field bag as returned by the store."""
        return cls(
            record_id=record_id,
            created_at=payload.get("createdat"),
            updated_at=payload.get("updatedat"),
            fields=dict(payload.get("fields") or {}),
        )

    def text(self, key: str) -> str:
        """Text field value, empty string when absent."""
        value = self.fields.get(key)
        return "" if value is None else str(value)

    def number(self, key: str) -> float:
        """Numeric field value, zero when absent, not a number or not finite."""
        value = self.fields.get(key)
        if isinstance(value, bool):
            return 0
        if isinstance(value, str):
            try:
                value = float(value)
            except ValueError:
                return 0
        if isinstance(value, float) and not math.isfinite(value):
            return 0
        if isinstance(value, (int, float)):
            return value
        return 0
