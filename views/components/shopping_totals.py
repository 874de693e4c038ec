"""
Shopping list totals component.
"""

import streamlit as st
from typing import Any, Callable


def render_shopping_totals(totals: Any, format_money: Callable[[float], str]):
    """
    Render progress and money totals for the listed entries.

    Args:
        totals: ShoppingTotals for the filtered entries
        format_money: Formats an amount with the currency symbol
    """
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Items", totals.item_count)
    with col2:
        st.metric("Purchased", totals.purchased_count)
    with col3:
        st.metric("Remaining", totals.remaining_count)

    st.progress(
        totals.purchased_count / totals.item_count if totals.item_count > 0 else 0
    )

    if totals.list_total > 0:
        st.markdown(f"**List total:** {format_money(totals.list_total)}")
        if totals.purchased_total > 0:
            st.success(f"Purchased total: {format_money(totals.purchased_total)}")
