"""Unit tests for the DashboardService snapshot reconciliation."""

import asyncio

import pytest

from inventory_dashboard.application.schemas import (
    CategoryForm,
    InventoryItemForm,
    LocationForm,
)
from inventory_dashboard.application.services import DashboardService
from inventory_dashboard.application.services import inventory_views
from inventory_dashboard.domain.entities import CollectionState, EntityKind, StockStatus
from inventory_dashboard.domain.exceptions import (
    EntityNotFoundError,
    OperationInProgressError,
    RemoteStoreError,
)
from inventory_dashboard.infrastructure.living_apps import (
    CategoryRepository,
    InventoryItemRepository,
    LocationRepository,
)
from tests.fakes.in_memory_store import InMemoryRecordStore

ITEMS_APP = "698494eea42675c0592289b9"
CATEGORIES_APP = "698494eea42675c0592289ba"
LOCATIONS_APP = "698494eea42675c0592289bb"


@pytest.fixture
def store() -> InMemoryRecordStore:
    store = InMemoryRecordStore()
    store.seed(ITEMS_APP, "a" * 24, name="Lampe", sku="A1", category="electronics", quantity=12, min_quantity=10, unit_price=20)
    store.seed(ITEMS_APP, "b" * 24, name="Stuhl", sku="B2", category="c" * 24, quantity=0, unit_price=50, location="d" * 24)
    store.seed(CATEGORIES_APP, "c" * 24, name="Möbel")
    store.seed(LOCATIONS_APP, "d" * 24, name="Regal A-01", description="Erdgeschoss")
    return store


@pytest.fixture
def service(store: InMemoryRecordStore) -> DashboardService:
    return DashboardService(
        items=InventoryItemRepository(store, ITEMS_APP),
        categories=CategoryRepository(store, CATEGORIES_APP),
        locations=LocationRepository(store, LOCATIONS_APP),
    )


# ── Refresh ──


@pytest.mark.asyncio
async def test_initial_state_is_idle(service: DashboardService):
    assert all(state == CollectionState.IDLE for state in service.states.values())
    assert service.items == []


@pytest.mark.asyncio
async def test_refresh_loads_every_collection(service: DashboardService):
    assert await service.refresh() is True

    assert len(service.items) == 2
    assert len(service.categories) == 1
    assert len(service.locations) == 1
    assert all(state == CollectionState.READY for state in service.states.values())


@pytest.mark.asyncio
async def test_failed_refresh_keeps_previous_snapshot(service, store):
    await service.refresh()
    store.seed(ITEMS_APP, "e" * 24, name="Neu")
    store.fail_on.add("list")

    assert await service.refresh() is False

    assert len(service.items) == 2
    assert service.state(EntityKind.INVENTORY_ITEMS) == CollectionState.READY


# ── Create / update ──


@pytest.mark.asyncio
async def test_create_then_refresh_shows_low_stock_monitor(service, store):
    """End-to-end: the new item shows up with its status and value."""
    await service.refresh()
    form = InventoryItemForm(
        name="Monitor", sku="M-100", quantity=5, min_quantity=10, unit_price=199.99, location="A-01"
    )
    value_before = service.totals().total_value

    fresh = await service.create_item(form)

    monitors = [r for r in service.items if r.fields.get("sku") == "M-100"]
    assert len(monitors) == 1
    assert inventory_views.stock_status(monitors[0]) == StockStatus.LOW_STOCK
    assert service.totals().total_value - value_before == pytest.approx(999.95)
    assert service.resolve_location_name("A-01") == "A-01"
    assert fresh == InventoryItemForm()
    assert form.name == "Monitor"


@pytest.mark.asyncio
async def test_failed_create_raises_and_leaves_form_and_snapshot(service, store):
    await service.refresh()
    store.fail_on.add("create")
    form = InventoryItemForm(name="Monitor", quantity=5)

    with pytest.raises(RemoteStoreError):
        await service.create_item(form)

    assert form == InventoryItemForm(name="Monitor", quantity=5)
    assert len(service.items) == 2
    assert service.state(EntityKind.INVENTORY_ITEMS) == CollectionState.READY


@pytest.mark.asyncio
async def test_update_sends_form_fields_and_reloads(service, store):
    await service.refresh()
    form = service.edit_item_form("a" * 24)
    form.quantity = 3

    await service.update_item("a" * 24, form)

    assert store.collections[ITEMS_APP]["a" * 24]["fields"]["quantity"] == 3
    updated = service.find(EntityKind.INVENTORY_ITEMS, "a" * 24)
    assert updated.fields["quantity"] == 3
    assert updated.updated_at is not None


@pytest.mark.asyncio
async def test_state_is_saving_while_write_in_flight(service, store):
    await service.refresh()
    store.gate = asyncio.Event()

    task = asyncio.create_task(service.create_item(InventoryItemForm(name="X")))
    await asyncio.sleep(0)
    assert service.state(EntityKind.INVENTORY_ITEMS) == CollectionState.SAVING

    store.gate.set()
    await task
    assert service.state(EntityKind.INVENTORY_ITEMS) == CollectionState.READY


@pytest.mark.asyncio
async def test_concurrent_save_of_same_record_is_rejected(service, store):
    await service.refresh()
    store.gate = asyncio.Event()
    form = service.edit_item_form("a" * 24)

    first = asyncio.create_task(service.update_item("a" * 24, form))
    await asyncio.sleep(0)

    with pytest.raises(OperationInProgressError):
        await service.update_item("a" * 24, form)

    store.gate.set()
    await first
    # Guard is released once the first save finishes
    await service.update_item("a" * 24, form)


@pytest.mark.asyncio
async def test_saves_of_different_records_run_concurrently(service, store):
    await service.refresh()
    store.gate = asyncio.Event()

    first = asyncio.create_task(service.update_item("a" * 24, service.edit_item_form("a" * 24)))
    second = asyncio.create_task(service.update_item("b" * 24, service.edit_item_form("b" * 24)))
    await asyncio.sleep(0)
    store.gate.set()

    await asyncio.gather(first, second)


# ── Delete ──


@pytest.mark.asyncio
async def test_delete_removes_exactly_one_record(service, store):
    await service.refresh()
    calls_before = len(store.calls)

    assert await service.delete_item("a" * 24) is True

    assert len(service.items) == 1
    assert all(r.record_id != "a" * 24 for r in service.items)
    # No reload after a delete
    assert store.calls[calls_before:] == [("delete", ITEMS_APP)]


@pytest.mark.asyncio
async def test_failed_delete_keeps_snapshot(service, store):
    await service.refresh()
    store.fail_on.add("delete")

    with pytest.raises(RemoteStoreError):
        await service.delete_item("a" * 24)

    assert len(service.items) == 2


# ── Categories and locations ──


@pytest.mark.asyncio
async def test_category_and_location_crud(service, store):
    await service.refresh()

    assert await service.create_category(CategoryForm(name="Büro")) == CategoryForm()
    assert await service.create_location(LocationForm(name="Lager B")) == LocationForm()
    assert {r.text("name") for r in service.categories} == {"Möbel", "Büro"}
    assert {r.text("name") for r in service.locations} == {"Regal A-01", "Lager B"}

    await service.update_location("d" * 24, LocationForm(name="Regal A-02", description=""))
    assert service.resolve_location_name("d" * 24) == "Regal A-02"

    await service.delete_category("c" * 24)
    assert len(service.categories) == 1


@pytest.mark.asyncio
async def test_deleted_category_leaves_dangling_reference(service):
    await service.refresh()
    assert service.resolve_category_name("c" * 24) == "Möbel"

    await service.delete_category("c" * 24)

    # The item still references the deleted category and shows its raw id
    assert service.resolve_category_name("c" * 24) == "c" * 24


@pytest.mark.asyncio
async def test_builtin_category_keys_resolve_to_labels(service):
    await service.refresh()
    assert service.resolve_category_name("electronics") == "Elektronik"
    assert service.resolve_category_name(None) == ""


# ── Forms ──


@pytest.mark.asyncio
async def test_edit_form_prefills_with_defaults(service):
    await service.refresh()

    form = service.edit_item_form("b" * 24)

    assert form.name == "Stuhl"
    assert form.quantity == 0
    assert form.min_quantity == 10
    assert form.unit_price == 50


@pytest.mark.asyncio
async def test_edit_form_of_unknown_record(service):
    await service.refresh()
    with pytest.raises(EntityNotFoundError):
        service.edit_item_form("f" * 24)


@pytest.mark.asyncio
async def test_fetch_reads_from_store(service, store):
    record = await service.fetch(EntityKind.LOCATIONS, "d" * 24)
    assert record.text("description") == "Erdgeschoss"
    assert ("get", LOCATIONS_APP) in store.calls
