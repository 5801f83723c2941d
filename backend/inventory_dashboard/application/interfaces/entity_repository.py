"""Abstract repository interface (port) for one entity collection."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from inventory_dashboard.domain.entities import Record

FieldsT = TypeVar("FieldsT", bound=BaseModel)


class EntityRepository(ABC, Generic[FieldsT]):
    """Port for one entity kind bound to a fixed collection."""

    @abstractmethod
    async def list_all(self) -> list[Record]:
        """Retrieve every record of the collection."""
        ...

    @abstractmethod
    async def get_one(self, record_id: str) -> Record:
        """Retrieve a single record by its store-assigned id."""
        ...

    @abstractmethod
    async def create_one(self, fields: FieldsT) -> Any:
        """Create a record from a field model."""
        ...

    @abstractmethod
    async def update_one(self, record_id: str, fields: FieldsT) -> Any:
        """Patch a record with the explicitly set keys of ``fields``."""
        ...

    @abstractmethod
    async def delete_one(self, record_id: str) -> bool:
        """Delete a record. Returns True on success."""
        ...
