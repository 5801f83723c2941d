"""Entity repositories bound to fixed Living Apps collections."""

from typing import Any, TypeVar

from pydantic import BaseModel

from inventory_dashboard.application.interfaces import EntityRepository, RecordStore
from inventory_dashboard.application.schemas import (
    CategoryFields,
    InventoryItemFields,
    LocationFields,
)
from inventory_dashboard.domain.entities import Record

FieldsT = TypeVar("FieldsT", bound=BaseModel)


class LivingAppsRepository(EntityRepository[FieldsT]):
    """Implements the EntityRepository port by delegating to a RecordStore."""

    def __init__(self, store: RecordStore, collection_id: str):
        self._store = store
        self._collection_id = collection_id

    @property
    def collection_id(self) -> str:
        return self._collection_id

    async def list_all(self) -> list[Record]:
        return await self._store.list(self._collection_id)

    async def get_one(self, record_id: str) -> Record:
        return await self._store.get(self._collection_id, record_id)

    async def create_one(self, fields: FieldsT) -> Any:
        return await self._store.create(
            self._collection_id, fields.model_dump(exclude_none=True)
        )

    async def update_one(self, record_id: str, fields: FieldsT) -> Any:
        return await self._store.update(
            self._collection_id, record_id, fields.model_dump(exclude_unset=True)
        )

    async def delete_one(self, record_id: str) -> bool:
        return await self._store.delete(self._collection_id, record_id)


class InventoryItemRepository(LivingAppsRepository[InventoryItemFields]):
    """Inventory items collection."""


class CategoryRepository(LivingAppsRepository[CategoryFields]):
    """Categories collection."""


class LocationRepository(LivingAppsRepository[LocationFields]):
    """Locations collection."""
