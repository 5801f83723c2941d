from .records import CategoryFields, InventoryItemFields, LocationFields
from .forms import CategoryForm, InventoryItemForm, LocationForm
from .dashboard import (
    CategoryChoice,
    DashboardResponse,
    InventoryItemView,
    RecordResponse,
    RefreshResponse,
    TotalsResponse,
)

__all__ = [
    "CategoryFields",
    "InventoryItemFields",
    "LocationFields",
    "CategoryForm",
    "InventoryItemForm",
    "LocationForm",
    "CategoryChoice",
    "DashboardResponse",
    "InventoryItemView",
    "RecordResponse",
    "RefreshResponse",
    "TotalsResponse",
]
