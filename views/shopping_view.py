"""
Shopping View - UI for building and checking off the shopping list.

This view handles:
- Adding catalog items with quantity and unit price
- Editing quantity and price in place, checking off purchased items
- Filtering by category and clearing the list
- List and purchased totals
"""

import streamlit as st

from controllers.shopping_controller import (
    ShoppingController,
    CATEGORY_FILTER_KEY,
    NEW_ITEM_KEY,
    NEW_PRICE_KEY,
    NEW_QUANTITY_KEY,
)
from services.state_mirror import StateMirror
from views.components.notice import render_notice
from views.components.shopping_entry import (
    render_shopping_entry_row,
    render_shopping_table_header,
)
from views.components.shopping_totals import render_shopping_totals


class ShoppingView:
    """View for shopping list UI."""

    def __init__(self, mirror: StateMirror):
        self.controller = ShoppingController(mirror)

    def render(self):
        """Main render method."""
        render_notice(self.controller.pop_notice())

        if self.controller.is_loading():
            st.info("Loading shopping list...")
            return

        st.markdown("### Shopping List")
        self._render_add_form()

        st.markdown("---")

        if not self.controller.has_entries():
            st.info("Your shopping list is empty. Add an item above.")
            return

        self._render_list()

    def _render_add_form(self):
        """Render the add-to-list inputs."""
        item_options = self.controller.get_item_options()
        if not item_options:
            st.info("Add items to the catalog before building a list.")
            return

        disabled = self.controller.is_submitting()
        col_item, col_qty, col_price, col_add = st.columns([3, 1.5, 1.5, 1])

        with col_item:
            st.selectbox(
                "Item",
                options=item_options,
                index=None,
                format_func=self.controller.get_item_label,
                placeholder="Select an item",
                key=NEW_ITEM_KEY,
                disabled=disabled,
                label_visibility="collapsed",
            )
        with col_qty:
            st.text_input(
                "Quantity",
                key=NEW_QUANTITY_KEY,
                placeholder="Quantity",
                disabled=disabled,
                label_visibility="collapsed",
            )
        with col_price:
            st.text_input(
                "Unit price",
                key=NEW_PRICE_KEY,
                placeholder=f"Unit price ({self.controller.settings.currency_symbol})",
                disabled=disabled,
                label_visibility="collapsed",
            )
        with col_add:
            st.button(
                "Add",
                type="primary",
                on_click=self.controller.add_to_list,
                disabled=disabled,
                use_container_width=True,
            )

    def _render_list(self):
        """Render filter, entries and totals."""
        disabled = self.controller.is_submitting()
        filter_options = self.controller.get_filter_options()

        col_title, col_filter, col_clear = st.columns([2, 2, 1])
        with col_title:
            st.markdown("#### Items on the list")
        with col_filter:
            st.selectbox(
                "Filter by category",
                options=filter_options,
                format_func=self.controller.get_filter_label,
                key=CATEGORY_FILTER_KEY,
                label_visibility="collapsed",
            )
        with col_clear:
            st.button(
                "Clear list",
                on_click=self.controller.clear_list,
                disabled=disabled,
                use_container_width=True,
            )

        rows = self.controller.get_rows()
        if not rows:
            st.caption("No items from this category on the list.")
        else:
            render_shopping_table_header()
            for row in rows:
                render_shopping_entry_row(
                    row=row,
                    disabled=disabled,
                    format_money=self.controller.format_money,
                    on_toggle=self.controller.toggle_purchased,
                    on_quantity_change=self.controller.change_quantity,
                    on_price_change=self.controller.change_price,
                    on_remove=self.controller.remove_entry,
                )

        st.markdown("---")
        render_shopping_totals(self.controller.get_totals(), self.controller.format_money)
