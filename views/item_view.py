"""
Item View - UI for managing the item catalog.

This view handles:
- Adding items (name, category, optional unit)
- Editing an item in place
- Deleting items
"""

import streamlit as st

from controllers.item_controller import (
    ItemController,
    EDIT_CATEGORY_KEY,
    EDIT_NAME_KEY,
    EDIT_UNIT_KEY,
    NEW_CATEGORY_KEY,
    NEW_NAME_KEY,
    NEW_UNIT_KEY,
)
from models.entities import Item
from services.state_mirror import StateMirror
from views.components.notice import render_notice


class ItemView:
    """View for item catalog UI."""

    def __init__(self, mirror: StateMirror):
        self.controller = ItemController(mirror)

    def render(self):
        """Main render method."""
        render_notice(self.controller.pop_notice())

        if self.controller.is_loading():
            st.info("Loading items...")
            return

        st.markdown("### Items")

        category_options = self.controller.get_category_options()
        if not category_options:
            st.info("Create a category first, then add items to it.")
        else:
            self._render_add_form(category_options)

        st.markdown("---")

        items = self.controller.get_items()
        if not items:
            st.info("No items in the catalog yet.")
            return

        for item in items:
            self._render_item_row(item, category_options)

    def _render_add_form(self, category_options: list[str]):
        """Render the new item inputs."""
        disabled = self.controller.is_submitting()
        col_name, col_category, col_unit, col_add = st.columns([3, 2, 1.5, 1])

        with col_name:
            st.text_input(
                "Item name",
                key=NEW_NAME_KEY,
                placeholder="Item name",
                disabled=disabled,
                label_visibility="collapsed",
            )
        with col_category:
            st.selectbox(
                "Category",
                options=category_options,
                index=None,
                format_func=self.controller.get_category_name,
                placeholder="Select a category",
                key=NEW_CATEGORY_KEY,
                disabled=disabled,
                label_visibility="collapsed",
            )
        with col_unit:
            st.text_input(
                "Unit",
                key=NEW_UNIT_KEY,
                placeholder="Unit (optional)",
                disabled=disabled,
                label_visibility="collapsed",
            )
        with col_add:
            st.button(
                "Add",
                type="primary",
                on_click=self.controller.add_item,
                disabled=disabled,
                use_container_width=True,
            )

    def _render_item_row(self, item: Item, category_options: list[str]):
        """Render one item, as text or as edit fields."""
        disabled = self.controller.is_submitting()

        if self.controller.get_editing_id() == item.id:
            col_name, col_category, col_unit, col_save = st.columns([3, 2, 1.5, 1])
            with col_name:
                st.text_input(
                    "Item name",
                    key=EDIT_NAME_KEY,
                    disabled=disabled,
                    label_visibility="collapsed",
                )
            with col_category:
                st.selectbox(
                    "Category",
                    options=category_options,
                    format_func=self.controller.get_category_name,
                    key=EDIT_CATEGORY_KEY,
                    disabled=disabled,
                    label_visibility="collapsed",
                )
            with col_unit:
                st.text_input(
                    "Unit",
                    key=EDIT_UNIT_KEY,
                    placeholder="Unit",
                    disabled=disabled,
                    label_visibility="collapsed",
                )
            with col_save:
                st.button(
                    "Save",
                    key=f"save_item_{item.id}",
                    type="primary",
                    on_click=self.controller.save_item,
                    args=(item.id,),
                    disabled=disabled,
                    use_container_width=True,
                )
            return

        col_name, col_edit, col_delete = st.columns([5, 1, 0.6])
        with col_name:
            st.markdown(f"**{item.name}**")
            details = self.controller.get_category_name(item.category_id)
            if item.unit:
                details = f"{details} • {item.unit}" if details else item.unit
            if details:
                st.caption(details)
        with col_edit:
            st.button(
                "Edit",
                key=f"edit_item_{item.id}",
                on_click=self.controller.start_editing,
                args=(item,),
                disabled=disabled,
                use_container_width=True,
            )
        with col_delete:
            st.button(
                "🗑️",
                key=f"delete_item_{item.id}",
                help="Delete item",
                on_click=self.controller.delete_item,
                args=(item.id,),
                disabled=disabled,
            )
