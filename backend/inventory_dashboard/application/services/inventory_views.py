"""Derived inventory views: filtering, aggregation and stock classification.

All functions are pure and recomputed from the current snapshot on every
call. Missing numeric fields count as zero, missing text as "".
"""

from collections.abc import Iterable

from inventory_dashboard.domain.entities import InventoryTotals, Record, StockStatus
from inventory_dashboard.infrastructure.living_apps.urls import extract_record_id

ALL_CATEGORIES = "all"

# Built-in category keys with their display labels.
CATEGORY_CHOICES: list[tuple[str, str]] = [
    (ALL_CATEGORIES, "Alle Kategorien"),
    ("electronics", "Elektronik"),
    ("furniture", "Möbel"),
    ("office", "Bürobedarf"),
]


def category_label(key: str) -> str:
    """Display label of a built-in category key, or the key itself."""
    for choice_key, label in CATEGORY_CHOICES:
        if choice_key == key:
            return label
    return key


def stock_status(item: Record) -> StockStatus:
    quantity = item.number("quantity")
    if quantity == 0:
        return StockStatus.SOLD_OUT
    if quantity <= item.number("min_quantity"):
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


def item_value(item: Record) -> float:
    return item.number("quantity") * item.number("unit_price")


def is_low_stock(item: Record) -> bool:
    return item.number("quantity") <= item.number("min_quantity")


def _reference_key(reference: str) -> str:
    return extract_record_id(reference) or reference


def filter_items(
    items: Iterable[Record], search_term: str = "", category: str = ALL_CATEGORIES
) -> list[Record]:
    """Items whose name or sku contains ``search_term`` and that match ``category``.

    The search is case-insensitive. Categories compare by record id, so a
    stored record URL matches its bare id and vice versa; the ``"all"``
    sentinel matches everything.
    """
    needle = (search_term or "").lower()
    wanted = _reference_key(category)
    selected = []
    for item in items:
        matches_search = (
            needle in item.text("name").lower() or needle in item.text("sku").lower()
        )
        matches_category = (
            category == ALL_CATEGORIES or _reference_key(item.text("category")) == wanted
        )
        if matches_search and matches_category:
            selected.append(item)
    return selected


def compute_totals(items: Iterable[Record]) -> InventoryTotals:
    item_count = 0
    total_quantity: float = 0
    total_value: float = 0
    low_stock_count = 0
    for item in items:
        item_count += 1
        total_quantity += item.number("quantity")
        total_value += item_value(item)
        if is_low_stock(item):
            low_stock_count += 1
    return InventoryTotals(
        item_count=item_count,
        total_quantity=total_quantity,
        total_value=total_value,
        low_stock_count=low_stock_count,
    )


def resolve_name(reference: str | None, records: Iterable[Record]) -> str:
    """Display name of the record a foreign reference points at.

    References may be bare ids or full record URLs. A dangling reference is
    returned unchanged.
    """
    if not reference:
        return ""
    record_id = extract_record_id(reference) or reference
    for record in records:
        if record.record_id == record_id:
            return record.text("name") or reference
    return reference
