"""Inventory item CRUD endpoints."""

from fastapi import APIRouter, Depends, Query, status

from inventory_dashboard.application.schemas import InventoryItemForm, RecordResponse
from inventory_dashboard.application.services import DashboardService
from inventory_dashboard.application.services import inventory_views
from inventory_dashboard.domain.entities import EntityKind
from inventory_dashboard.infrastructure.dependencies import get_dashboard_service
from inventory_dashboard.presentation.api.v1.endpoints import errors

router = APIRouter(prefix="/inventory-items", tags=["Inventory Items"])


@router.get("", response_model=list[RecordResponse])
async def list_items(
    search: str = Query("", description="Case-insensitive match on name or SKU"),
    category: str = Query(inventory_views.ALL_CATEGORIES),
    service: DashboardService = Depends(get_dashboard_service),
) -> list[RecordResponse]:
    """List items from the local snapshot, filtered."""
    return [
        RecordResponse.model_validate(r, from_attributes=True)
        for r in service.filtered_items(search, category)
    ]


@router.get("/new-form", response_model=InventoryItemForm)
async def new_item_form(
    service: DashboardService = Depends(get_dashboard_service),
) -> InventoryItemForm:
    """Blank form for the add dialog."""
    return service.new_item_form()


@router.get("/{record_id}", response_model=RecordResponse)
async def get_item(
    record_id: str,
    service: DashboardService = Depends(get_dashboard_service),
) -> RecordResponse:
    """Retrieve a single item straight from the store."""
    with errors.store_errors(errors.LOAD_FAILED):
        record = await service.fetch(EntityKind.INVENTORY_ITEMS, record_id)
    return RecordResponse.model_validate(record, from_attributes=True)


@router.get("/{record_id}/form", response_model=InventoryItemForm)
async def edit_item_form(
    record_id: str,
    service: DashboardService = Depends(get_dashboard_service),
) -> InventoryItemForm:
    """Form prefilled from the snapshot for the edit dialog."""
    with errors.store_errors(errors.LOAD_FAILED):
        return service.edit_item_form(record_id)


@router.post("", response_model=InventoryItemForm, status_code=status.HTTP_201_CREATED)
async def create_item(
    form: InventoryItemForm,
    service: DashboardService = Depends(get_dashboard_service),
) -> InventoryItemForm:
    """Create an item and reload; returns a fresh form for the dialog."""
    with errors.store_errors(errors.CREATE_ITEM_FAILED):
        return await service.create_item(form)


@router.patch("/{record_id}", response_model=InventoryItemForm)
async def update_item(
    record_id: str,
    form: InventoryItemForm,
    service: DashboardService = Depends(get_dashboard_service),
) -> InventoryItemForm:
    """Partial update of an item, then reload; returns a fresh form for the dialog.

    Only the submitted fields are sent to the store; omitted ones keep
    their stored values.
    """
    with errors.store_errors(errors.UPDATE_ITEM_FAILED):
        return await service.update_item(record_id, form)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(
    record_id: str,
    service: DashboardService = Depends(get_dashboard_service),
) -> None:
    """Delete an item and drop it from the snapshot."""
    with errors.store_errors(errors.DELETE_ITEM_FAILED):
        await service.delete_item(record_id)
