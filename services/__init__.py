"""
Services layer - pure business logic, no Streamlit dependencies.

The state mirror is imported from services.state_mirror directly; it
depends on the repositories, which in turn use the store clients here.
"""

from services.errors import InvalidInputError
from services.field_parsers import (
    Commit,
    PriceField,
    QuantityField,
    apply_text,
    parse_price_input,
    parse_quantity_input,
)
from services.remote_store import RemoteStoreError, RemoteTable, PostgrestStore, PostgrestTable
from services.shopping_list_service import (
    ALL_CATEGORIES,
    ShoppingRow,
    ShoppingTotals,
    build_rows,
    calculate_subtotal,
    calculate_totals,
    filter_entries,
    format_currency,
)

__all__ = [
    "InvalidInputError",
    "Commit",
    "PriceField",
    "QuantityField",
    "apply_text",
    "parse_price_input",
    "parse_quantity_input",
    "RemoteStoreError",
    "RemoteTable",
    "PostgrestStore",
    "PostgrestTable",
    "ALL_CATEGORIES",
    "ShoppingRow",
    "ShoppingTotals",
    "build_rows",
    "calculate_subtotal",
    "calculate_totals",
    "filter_entries",
    "format_currency",
]
