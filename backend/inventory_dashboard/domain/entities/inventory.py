"""Domain entities for inventory views — stock classification and totals."""

from dataclasses import dataclass
from enum import Enum


class StockStatus(str, Enum):
    """Three-tier stock classification of an inventory item."""

    SOLD_OUT = "sold_out"
    LOW_STOCK = "low_stock"
    IN_STOCK = "in_stock"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    StockStatus.SOLD_OUT: "Ausverkauft",
    StockStatus.LOW_STOCK: "Niedriger Bestand",
    StockStatus.IN_STOCK: "Auf Lager",
}


class CollectionState(str, Enum):
    """Lifecycle of one locally held collection snapshot."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    SAVING = "saving"


class EntityKind(str, Enum):
    """Entity kinds kept by the dashboard, one remote collection each."""

    INVENTORY_ITEMS = "inventory_items"
    CATEGORIES = "categories"
    LOCATIONS = "locations"


@dataclass(frozen=True)
class InventoryTotals:
    """Aggregates over the whole inventory snapshot."""

    item_count: int = 0
    total_quantity: float = 0
    total_value: float = 0
    low_stock_count: int = 0
