"""Dashboard endpoints: aggregates, item views, refresh."""

from fastapi import APIRouter, Depends, Query

from inventory_dashboard.application.schemas import (
    DashboardResponse,
    InventoryItemView,
    RefreshResponse,
    TotalsResponse,
)
from inventory_dashboard.application.services import DashboardService
from inventory_dashboard.application.services import inventory_views
from inventory_dashboard.domain.entities import Record
from inventory_dashboard.infrastructure.dependencies import get_dashboard_service

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


def _item_view(item: Record, service: DashboardService) -> InventoryItemView:
    """Annotate an inventory record with its derived values."""
    status = inventory_views.stock_status(item)
    return InventoryItemView(
        record_id=item.record_id,
        created_at=item.created_at,
        updated_at=item.updated_at,
        fields=item.fields,
        stock_status=status,
        stock_label=status.label,
        category_name=service.resolve_category_name(item.fields.get("category")),
        location_name=service.resolve_location_name(item.fields.get("location")),
        value=inventory_views.item_value(item),
    )


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    search: str = Query("", description="Case-insensitive match on name or SKU"),
    category: str = Query(inventory_views.ALL_CATEGORIES, description="Category id or 'all'"),
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardResponse:
    """Totals over the whole snapshot plus the filtered item list."""
    return DashboardResponse(
        states=service.states,
        totals=TotalsResponse.model_validate(service.totals()),
        items=[_item_view(item, service) for item in service.filtered_items(search, category)],
    )


@router.post("/refresh", response_model=RefreshResponse)
async def refresh_dashboard(
    service: DashboardService = Depends(get_dashboard_service),
) -> RefreshResponse:
    """Reload every collection. A failed load keeps the previous snapshot."""
    ok = await service.refresh()
    return RefreshResponse(ok=ok, states=service.states)
