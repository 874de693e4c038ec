"""Tests for shopping list totals, filtering and display rows."""

from __future__ import annotations

import pytest

from models.entities import Category, Item, ShoppingListEntry
from services.shopping_list_service import (
    ALL_CATEGORIES,
    build_rows,
    calculate_subtotal,
    calculate_totals,
    filter_entries,
    format_currency,
)


@pytest.fixture()
def catalog():
    categories = [Category(id="c1", name="Dairy"), Category(id="c2", name="Bakery")]
    items = [
        Item(id="i1", name="Milk", category_id="c1", unit="l"),
        Item(id="i2", name="Bread", category_id="c2"),
    ]
    return categories, items


def _entry(entry_id, item_id, quantity, unit_price=None, purchased=False):
    return ShoppingListEntry(
        id=entry_id,
        item_id=item_id,
        quantity=quantity,
        unit_price=unit_price,
        purchased=purchased,
    )


def test_subtotal_treats_missing_price_as_zero():
    assert calculate_subtotal(3, None) == 0.0
    assert calculate_subtotal(3, 0) == 0.0
    assert calculate_subtotal(3, 1.5) == pytest.approx(4.5)


def test_totals_split_purchased_from_list_total():
    entries = [
        _entry("e1", "i1", 2, 3.0, purchased=False),
        _entry("e2", "i2", 1, 5.0, purchased=True),
    ]

    totals = calculate_totals(entries)

    assert format_currency(totals.list_total) == "R$ 11.00"
    assert format_currency(totals.purchased_total) == "R$ 5.00"
    assert totals.item_count == 2
    assert totals.purchased_count == 1
    assert totals.remaining_count == 1


def test_totals_of_empty_list():
    totals = calculate_totals([])

    assert totals.list_total == 0.0
    assert totals.purchased_total == 0.0
    assert totals.item_count == 0


def test_filter_by_category(catalog):
    _, items = catalog
    entries = [_entry("e1", "i1", 1), _entry("e2", "i2", 1)]

    assert [e.id for e in filter_entries(entries, items, "c1")] == ["e1"]
    assert [e.id for e in filter_entries(entries, items, ALL_CATEGORIES)] == ["e1", "e2"]
    assert filter_entries(entries, items, "unknown") == []


def test_orphaned_entries_only_count_without_filter(catalog):
    _, items = catalog
    entries = [_entry("e1", "i1", 1, 2.0), _entry("e2", "gone", 2, 1.0)]

    unfiltered = calculate_totals(filter_entries(entries, items, ALL_CATEGORIES))
    dairy = calculate_totals(filter_entries(entries, items, "c1"))

    assert unfiltered.list_total == pytest.approx(4.0)
    assert dairy.list_total == pytest.approx(2.0)


def test_build_rows_joins_names(catalog):
    categories, items = catalog
    entries = [_entry("e1", "i1", 2, 1.25), _entry("e2", "gone", 1)]

    rows = build_rows(entries, items, categories)

    assert rows[0].item_name == "Milk"
    assert rows[0].category_name == "Dairy"
    assert rows[0].unit == "l"
    assert rows[0].subtotal == pytest.approx(2.5)
    assert rows[1].item_name == "Unknown item"
    assert rows[1].category_name == ""
    assert rows[1].subtotal == 0.0


def test_format_currency_with_custom_symbol():
    assert format_currency(1234.5, "$") == "$ 1234.50"
    assert format_currency(0) == "R$ 0.00"
