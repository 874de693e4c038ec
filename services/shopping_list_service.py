"""
Shopping List Service - derived values for the shopping list view.

This service computes everything the list shows that is not stored:
- Per-entry subtotals (quantity x unit price)
- Category filtering
- List and purchased totals
- Display rows joining entries with their item and category
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from models.entities import Category, Item, ShoppingListEntry

# Filter value that keeps every entry
ALL_CATEGORIES = "all"


@dataclass
class ShoppingTotals:
    """Totals over a (possibly filtered) set of entries."""
    list_total: float
    purchased_total: float
    item_count: int
    purchased_count: int

    @property
    def remaining_count(self) -> int:
        return self.item_count - self.purchased_count


@dataclass
class ShoppingRow:
    """One entry joined with its item and category for display."""
    entry: ShoppingListEntry
    item_name: str
    category_name: str
    unit: Optional[str]
    subtotal: float


def calculate_subtotal(quantity: int, unit_price: Optional[float]) -> float:
    """Quantity times price; entries without a price count as zero."""
    if not unit_price:
        return 0.0
    return quantity * unit_price


def filter_entries(
    entries: Iterable[ShoppingListEntry],
    items: Iterable[Item],
    category_filter: str = ALL_CATEGORIES
) -> list[ShoppingListEntry]:
    """
    Keep the entries whose item belongs to a category.

    Args:
        entries: Shopping list entries
        items: Catalog items used to look up each entry's category
        category_filter: ALL_CATEGORIES or a category ID

    Entries pointing at an item that is not loaded only survive the
    ALL_CATEGORIES filter.
    """
    if category_filter == ALL_CATEGORIES:
        return list(entries)

    category_by_item = {item.id: item.category_id for item in items}
    return [
        entry for entry in entries
        if category_by_item.get(entry.item_id) == category_filter
    ]


def calculate_totals(entries: Iterable[ShoppingListEntry]) -> ShoppingTotals:
    """Sum subtotals for all entries and for purchased entries only."""
    list_total = 0.0
    purchased_total = 0.0
    item_count = 0
    purchased_count = 0

    for entry in entries:
        subtotal = calculate_subtotal(entry.quantity, entry.unit_price)
        list_total += subtotal
        item_count += 1
        if entry.purchased:
            purchased_total += subtotal
            purchased_count += 1

    return ShoppingTotals(
        list_total=list_total,
        purchased_total=purchased_total,
        item_count=item_count,
        purchased_count=purchased_count,
    )


def build_rows(
    entries: Iterable[ShoppingListEntry],
    items: Iterable[Item],
    categories: Iterable[Category]
) -> list[ShoppingRow]:
    """Join entries with item and category names, keeping list order."""
    items_by_id = {item.id: item for item in items}
    category_names = {category.id: category.name for category in categories}

    rows = []
    for entry in entries:
        item = items_by_id.get(entry.item_id)
        rows.append(ShoppingRow(
            entry=entry,
            item_name=item.name if item else "Unknown item",
            category_name=category_names.get(item.category_id, "") if item else "",
            unit=item.unit if item else None,
            subtotal=calculate_subtotal(entry.quantity, entry.unit_price),
        ))
    return rows


def format_currency(value: float, symbol: str = "R$") -> str:
    """Format a money amount with two decimals (e.g., 'R$ 11.00')."""
    return f"{symbol} {value:.2f}"
