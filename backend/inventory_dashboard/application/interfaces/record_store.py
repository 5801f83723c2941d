"""Abstract record store interface (port) for the remote collection API."""

from abc import ABC, abstractmethod
from typing import Any

from inventory_dashboard.domain.entities import Record


class RecordStore(ABC):
    """Port for generic CRUD against schema-less remote collections.

    Every operation raises ``RemoteStoreError`` on failure; there is no
    per-status differentiation.
    """

    @abstractmethod
    async def list(self, collection_id: str) -> list[Record]:
        """Fetch every record of a collection. Order is unspecified."""
        ...

    @abstractmethod
    async def get(self, collection_id: str, record_id: str) -> Record:
        """Fetch a single record."""
        ...

    @abstractmethod
    async def create(self, collection_id: str, fields: dict[str, Any]) -> Any:
        """Create a record. The result is opaque; re-list to observe the new id."""
        ...

    @abstractmethod
    async def update(
        self, collection_id: str, record_id: str, fields: dict[str, Any]
    ) -> Any:
        """Patch a record. Keys absent from ``fields`` keep their values."""
        ...

    @abstractmethod
    async def delete(self, collection_id: str, record_id: str) -> bool:
        """Delete a record. Returns True on any non-error response."""
        ...
