"""Dashboard service holding the local snapshot of every collection.

The snapshots are a cache of the remote store. They are replaced wholesale
on refresh and filtered in place after a delete; nothing else mutates them.
Every create or update is followed by a full refresh instead of a local
merge, so the store stays the single source of truth for ids and
timestamps.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from inventory_dashboard.application.interfaces import EntityRepository
from inventory_dashboard.application.schemas import (
    CategoryFields,
    CategoryForm,
    InventoryItemFields,
    InventoryItemForm,
    LocationFields,
    LocationForm,
)
from inventory_dashboard.application.services import inventory_views
from inventory_dashboard.application.services.single_flight import SingleFlight
from inventory_dashboard.domain.entities import (
    CollectionState,
    EntityKind,
    InventoryTotals,
    Record,
)
from inventory_dashboard.domain.exceptions import EntityNotFoundError, RemoteStoreError

logger = logging.getLogger(__name__)

# Key used by the single-flight guard for saves that have no record id yet
NEW_RECORD_KEY = "new"


class DashboardService:
    """Owns the inventory, category and location snapshots.

    Per collection the state moves ``idle -> loading -> ready`` on refresh
    and ``ready -> saving -> ready`` around a create or update. Saves on the
    same record (or two concurrent creates in one collection) are rejected
    with OperationInProgressError while the first one is in flight.
    """

    def __init__(
        self,
        items: EntityRepository[InventoryItemFields],
        categories: EntityRepository[CategoryFields],
        locations: EntityRepository[LocationFields],
        *,
        default_min_quantity: int = 10,
    ):
        self._repositories: dict[EntityKind, EntityRepository] = {
            EntityKind.INVENTORY_ITEMS: items,
            EntityKind.CATEGORIES: categories,
            EntityKind.LOCATIONS: locations,
        }
        self._snapshots: dict[EntityKind, list[Record]] = {
            kind: [] for kind in self._repositories
        }
        self._states: dict[EntityKind, CollectionState] = {
            kind: CollectionState.IDLE for kind in self._repositories
        }
        self._guard = SingleFlight()
        self._default_min_quantity = default_min_quantity

    # ── Snapshot access ─────────────────────────────────────────────

    @property
    def items(self) -> list[Record]:
        return list(self._snapshots[EntityKind.INVENTORY_ITEMS])

    @property
    def categories(self) -> list[Record]:
        return list(self._snapshots[EntityKind.CATEGORIES])

    @property
    def locations(self) -> list[Record]:
        return list(self._snapshots[EntityKind.LOCATIONS])

    def state(self, kind: EntityKind) -> CollectionState:
        return self._states[kind]

    @property
    def states(self) -> dict[str, CollectionState]:
        return {kind.value: state for kind, state in self._states.items()}

    def find(self, kind: EntityKind, record_id: str) -> Record:
        """Look up a record in the local snapshot."""
        for record in self._snapshots[kind]:
            if record.record_id == record_id:
                return record
        raise EntityNotFoundError(kind.value, record_id)

    async def fetch(self, kind: EntityKind, record_id: str) -> Record:
        """Fetch one record straight from the store, bypassing the snapshot."""
        return await self._repositories[kind].get_one(record_id)

    # ── Refresh ─────────────────────────────────────────────────────

    async def refresh(self) -> bool:
        """Reload every collection concurrently.

        Snapshots are replaced only when all fetches succeed. On failure the
        previous snapshots stay in place, a diagnostic is logged and False
        is returned.
        """
        kinds = list(self._repositories)
        for kind in kinds:
            self._states[kind] = CollectionState.LOADING

        try:
            results = await asyncio.gather(
                *(self._repositories[kind].list_all() for kind in kinds)
            )
        except RemoteStoreError as e:
            logger.error("Failed to load collections: %s", e.body)
            return False
        finally:
            for kind in kinds:
                self._states[kind] = CollectionState.READY

        for kind, records in zip(kinds, results):
            self._snapshots[kind] = list(records)
        logger.info(
            "Loaded %d items, %d categories, %d locations",
            *(len(self._snapshots[kind]) for kind in kinds),
        )
        return True

    # ── Writes ──────────────────────────────────────────────────────

    async def _save(
        self,
        kind: EntityKind,
        key: str,
        action: str,
        send: Callable[[], Awaitable[Any]],
    ) -> None:
        """Run one create/update, then reload the full snapshot."""
        async with self._guard.claim(kind.value, key):
            self._states[kind] = CollectionState.SAVING
            try:
                await send()
            except RemoteStoreError as e:
                logger.error("Failed to %s %s '%s': %s", action, kind.value, key, e.body)
                raise
            finally:
                self._states[kind] = CollectionState.READY
            logger.info("%s of %s '%s' succeeded", action, kind.value, key)
            await self.refresh()

    async def _delete(self, kind: EntityKind, record_id: str) -> bool:
        """Delete remotely, then drop the record from the local snapshot."""
        async with self._guard.claim(kind.value, record_id):
            try:
                await self._repositories[kind].delete_one(record_id)
            except RemoteStoreError as e:
                logger.error("Failed to delete %s '%s': %s", kind.value, record_id, e.body)
                raise
        self._snapshots[kind] = [
            record for record in self._snapshots[kind] if record.record_id != record_id
        ]
        logger.info("Deleted %s '%s'", kind.value, record_id)
        return True

    async def create_item(self, form: InventoryItemForm) -> InventoryItemForm:
        """Create an item; returns a fresh form, the input form is never touched."""
        repo = self._repositories[EntityKind.INVENTORY_ITEMS]
        await self._save(
            EntityKind.INVENTORY_ITEMS,
            NEW_RECORD_KEY,
            "create",
            lambda: repo.create_one(form.to_fields()),
        )
        return self.new_item_form()

    async def update_item(self, record_id: str, form: InventoryItemForm) -> InventoryItemForm:
        repo = self._repositories[EntityKind.INVENTORY_ITEMS]
        await self._save(
            EntityKind.INVENTORY_ITEMS,
            record_id,
            "update",
            lambda: repo.update_one(record_id, form.to_fields(partial=True)),
        )
        return self.new_item_form()

    async def delete_item(self, record_id: str) -> bool:
        return await self._delete(EntityKind.INVENTORY_ITEMS, record_id)

    async def create_category(self, form: CategoryForm) -> CategoryForm:
        repo = self._repositories[EntityKind.CATEGORIES]
        await self._save(
            EntityKind.CATEGORIES,
            NEW_RECORD_KEY,
            "create",
            lambda: repo.create_one(form.to_fields()),
        )
        return CategoryForm()

    async def update_category(self, record_id: str, form: CategoryForm) -> CategoryForm:
        repo = self._repositories[EntityKind.CATEGORIES]
        await self._save(
            EntityKind.CATEGORIES,
            record_id,
            "update",
            lambda: repo.update_one(record_id, form.to_fields(partial=True)),
        )
        return CategoryForm()

    async def delete_category(self, record_id: str) -> bool:
        return await self._delete(EntityKind.CATEGORIES, record_id)

    async def create_location(self, form: LocationForm) -> LocationForm:
        repo = self._repositories[EntityKind.LOCATIONS]
        await self._save(
            EntityKind.LOCATIONS,
            NEW_RECORD_KEY,
            "create",
            lambda: repo.create_one(form.to_fields()),
        )
        return LocationForm()

    async def update_location(self, record_id: str, form: LocationForm) -> LocationForm:
        repo = self._repositories[EntityKind.LOCATIONS]
        await self._save(
            EntityKind.LOCATIONS,
            record_id,
            "update",
            lambda: repo.update_one(record_id, form.to_fields(partial=True)),
        )
        return LocationForm()

    async def delete_location(self, record_id: str) -> bool:
        return await self._delete(EntityKind.LOCATIONS, record_id)

    # ── Forms ───────────────────────────────────────────────────────

    def new_item_form(self) -> InventoryItemForm:
        return InventoryItemForm.empty(min_quantity=self._default_min_quantity)

    def edit_item_form(self, record_id: str) -> InventoryItemForm:
        record = self.find(EntityKind.INVENTORY_ITEMS, record_id)
        return InventoryItemForm.from_record(record, min_quantity=self._default_min_quantity)

    # ── Derived views ───────────────────────────────────────────────

    def filtered_items(
        self, search_term: str = "", category: str = inventory_views.ALL_CATEGORIES
    ) -> list[Record]:
        return inventory_views.filter_items(self.items, search_term, category)

    def totals(self) -> InventoryTotals:
        return inventory_views.compute_totals(self.items)

    def resolve_category_name(self, reference: str | None) -> str:
        """Category display name; built-in keys use their label, dangling ids stay raw."""
        name = inventory_views.resolve_name(reference, self.categories)
        if name == reference and reference:
            return inventory_views.category_label(reference)
        return name

    def resolve_location_name(self, reference: str | None) -> str:
        return inventory_views.resolve_name(reference, self.locations)
