"""
Shopping list entry components.

Provides the table header and one editable row per entry.
"""

import streamlit as st
from typing import Any, Callable

from controllers.shopping_controller import price_key, purchased_key, quantity_key

# checkbox | item | qty | price | subtotal | remove
ROW_LAYOUT = [0.5, 3, 1.2, 1.5, 1.5, 0.6]


def render_shopping_table_header():
    """Render the table header row."""
    col_check, col_item, col_qty, col_price, col_subtotal, col_remove = st.columns(ROW_LAYOUT)

    with col_check:
        st.caption("✓")
    with col_item:
        st.caption("Item")
    with col_qty:
        st.caption("Qty")
    with col_price:
        st.caption("Unit price")
    with col_subtotal:
        st.caption("Subtotal")
    with col_remove:
        st.caption("")


def render_shopping_entry_row(
    row: Any,
    disabled: bool,
    format_money: Callable[[float], str],
    on_toggle: Callable[[str], Any],
    on_quantity_change: Callable[[str], Any],
    on_price_change: Callable[[str], Any],
    on_remove: Callable[[str], Any],
):
    """
    Render one shopping list entry.

    Args:
        row: ShoppingRow (entry joined with item and category names)
        disabled: Whether the view is waiting on a store call
        format_money: Formats an amount with the currency symbol
        on_toggle: Callback when the purchased checkbox changes
        on_quantity_change: Callback when the quantity field is committed
        on_price_change: Callback when the price field is committed
        on_remove: Callback to remove the entry
    """
    entry = row.entry
    col_check, col_item, col_qty, col_price, col_subtotal, col_remove = st.columns(ROW_LAYOUT)

    with col_check:
        st.checkbox(
            "purchased",
            key=purchased_key(entry.id),
            on_change=on_toggle,
            args=(entry.id,),
            disabled=disabled,
            label_visibility="collapsed",
        )

    with col_item:
        details = row.category_name
        if row.unit:
            details = f"{details} • {row.unit}" if details else row.unit

        if entry.purchased:
            st.markdown(f"~~{row.item_name}~~")
        else:
            st.markdown(f"**{row.item_name}**")
        if details:
            st.caption(details)

    with col_qty:
        st.text_input(
            "Quantity",
            key=quantity_key(entry.id),
            on_change=on_quantity_change,
            args=(entry.id,),
            disabled=disabled,
            label_visibility="collapsed",
        )

    with col_price:
        st.text_input(
            "Unit price",
            key=price_key(entry.id),
            on_change=on_price_change,
            args=(entry.id,),
            placeholder="0,00",
            disabled=disabled,
            label_visibility="collapsed",
        )

    with col_subtotal:
        if entry.unit_price:
            st.markdown(f"**{format_money(row.subtotal)}**")
        else:
            st.markdown("--")

    with col_remove:
        st.button(
            "🗑️",
            key=f"remove_{entry.id}",
            help="Remove from list",
            on_click=on_remove,
            args=(entry.id,),
            disabled=disabled,
        )
