"""Pydantic DTOs returned by the dashboard API."""

from typing import Any

from pydantic import BaseModel

from inventory_dashboard.domain.entities import CollectionState, StockStatus


class RecordResponse(BaseModel):
    """Schema returned to the client for any record."""

    record_id: str
    created_at: str | None
    updated_at: str | None
    fields: dict[str, Any]

    model_config = {"from_attributes": True}


class InventoryItemView(BaseModel):
    """An inventory record annotated with derived values."""

    record_id: str
    created_at: str | None
    updated_at: str | None
    fields: dict[str, Any]
    stock_status: StockStatus
    stock_label: str
    category_name: str
    location_name: str
    value: float


class TotalsResponse(BaseModel):
    item_count: int
    total_quantity: float
    total_value: float
    low_stock_count: int

    model_config = {"from_attributes": True}


class DashboardResponse(BaseModel):
    """Snapshot states, aggregates and the filtered item list."""

    states: dict[str, CollectionState]
    totals: TotalsResponse
    items: list[InventoryItemView]


class RefreshResponse(BaseModel):
    ok: bool
    states: dict[str, CollectionState]


class CategoryChoice(BaseModel):
    key: str
    label: str
