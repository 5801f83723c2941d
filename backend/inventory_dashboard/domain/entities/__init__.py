from .record import Record
from .inventory import CollectionState, EntityKind, InventoryTotals, StockStatus

__all__ = [
    "Record",
    "CollectionState",
    "EntityKind",
    "InventoryTotals",
    "StockStatus",
]
