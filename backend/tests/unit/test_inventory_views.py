"""Unit tests for filtering, aggregation and stock classification."""

import pytest

from inventory_dashboard.application.services import inventory_views
from inventory_dashboard.domain.entities import Record, StockStatus
from inventory_dashboard.infrastructure.living_apps.urls import create_record_url


def _item(record_id: str = "a" * 24, **fields) -> Record:
    return Record(record_id=record_id, created_at="2024-01-01T00:00:00", fields=fields)


# ── Stock status ──


@pytest.mark.parametrize(
    ("fields", "expected"),
    [
        ({"quantity": 0, "min_quantity": 10}, StockStatus.SOLD_OUT),
        ({"min_quantity": 10}, StockStatus.SOLD_OUT),
        ({}, StockStatus.SOLD_OUT),
        ({"quantity": 1, "min_quantity": 10}, StockStatus.LOW_STOCK),
        ({"quantity": 10, "min_quantity": 10}, StockStatus.LOW_STOCK),
        ({"quantity": 11, "min_quantity": 10}, StockStatus.IN_STOCK),
        ({"quantity": 3}, StockStatus.IN_STOCK),
    ],
)
def test_stock_status(fields, expected):
    assert inventory_views.stock_status(_item(**fields)) == expected


def test_stock_status_labels():
    assert StockStatus.SOLD_OUT.label == "Ausverkauft"
    assert StockStatus.LOW_STOCK.label == "Niedriger Bestand"
    assert StockStatus.IN_STOCK.label == "Auf Lager"


# ── Totals ──


def test_totals_treat_missing_values_as_zero():
    items = [
        _item("1" * 24, quantity=5, unit_price=2.5, min_quantity=2),
        _item("2" * 24, quantity=3),
        _item("3" * 24, unit_price=100),
    ]

    totals = inventory_views.compute_totals(items)

    assert totals.item_count == 3
    assert totals.total_quantity == 8
    assert totals.total_value == pytest.approx(12.5)
    # quantity 3 vs min 0 is fine; missing quantity 0 <= 0 is low
    assert totals.low_stock_count == 1


def test_total_value_changes_by_single_item_delta():
    items = [
        _item("1" * 24, quantity=5, unit_price=199.99),
        _item("2" * 24, quantity=2, unit_price=10),
    ]
    before = inventory_views.compute_totals(items).total_value

    items[1] = _item("2" * 24, quantity=7, unit_price=10)
    after = inventory_views.compute_totals(items).total_value

    assert after - before == pytest.approx((7 - 2) * 10)


def test_totals_of_empty_snapshot():
    totals = inventory_views.compute_totals([])
    assert totals.item_count == 0
    assert totals.total_value == 0
    assert totals.low_stock_count == 0


def test_non_finite_stored_numbers_count_as_zero():
    items = [
        _item("1" * 24, quantity="nan", unit_price="inf"),
        _item("2" * 24, quantity=float("inf"), unit_price=3),
        _item("3" * 24, quantity=2, unit_price="-Infinity"),
        _item("4" * 24, quantity="4", unit_price="2.5"),
    ]

    totals = inventory_views.compute_totals(items)

    assert totals.total_quantity == 6
    assert totals.total_value == pytest.approx(10)
    assert inventory_views.stock_status(items[0]) == StockStatus.SOLD_OUT


# ── Filtering ──


@pytest.fixture
def lamp_and_chair() -> list[Record]:
    return [
        _item("1" * 24, name="Lampe", sku="A1", category="electronics"),
        _item("2" * 24, name="Stuhl", sku="B2", category="furniture"),
    ]


def test_search_matches_name_case_insensitively(lamp_and_chair):
    result = inventory_views.filter_items(lamp_and_chair, "lam", "all")
    assert [r.record_id for r in result] == ["1" * 24]


def test_category_filter_with_empty_search(lamp_and_chair):
    result = inventory_views.filter_items(lamp_and_chair, "", "furniture")
    assert [r.record_id for r in result] == ["2" * 24]


def test_search_matches_sku(lamp_and_chair):
    result = inventory_views.filter_items(lamp_and_chair, "b2")
    assert [r.record_id for r in result] == ["2" * 24]


def test_search_and_category_must_both_match(lamp_and_chair):
    assert inventory_views.filter_items(lamp_and_chair, "lam", "furniture") == []


def test_items_without_name_or_sku_match_empty_search():
    items = [_item("1" * 24)]
    assert inventory_views.filter_items(items, "") == items
    assert inventory_views.filter_items(items, "x") == []


def test_category_filter_matches_url_and_bare_id():
    url = create_record_url("698494eea42675c0592289ba", "c" * 24)
    items = [_item("1" * 24, name="Tisch", category=url), _item("2" * 24, name="Bank", category="c" * 24)]

    by_id = inventory_views.filter_items(items, "", "c" * 24)
    by_url = inventory_views.filter_items(items, "", url)

    assert [r.record_id for r in by_id] == ["1" * 24, "2" * 24]
    assert [r.record_id for r in by_url] == ["1" * 24, "2" * 24]


# ── Name resolution ──


def test_resolve_name_by_id_and_by_url():
    locations = [_item("c" * 24, name="Regal A-01")]

    assert inventory_views.resolve_name("c" * 24, locations) == "Regal A-01"
    url = f"https://my.living-apps.de/rest/apps/{'d' * 24}/records/{'c' * 24}"
    assert inventory_views.resolve_name(url, locations) == "Regal A-01"


def test_resolve_name_keeps_dangling_reference():
    assert inventory_views.resolve_name("f" * 24, []) == "f" * 24
    assert inventory_views.resolve_name("A-01", [_item("c" * 24, name="x")]) == "A-01"


def test_resolve_name_of_empty_reference():
    assert inventory_views.resolve_name(None, []) == ""


def test_category_label_falls_back_to_key():
    assert inventory_views.category_label("furniture") == "Möbel"
    assert inventory_views.category_label("garden") == "garden"
