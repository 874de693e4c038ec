"""
Item Controller - manages the catalog items tab.

This controller handles:
- Adding, editing and deleting items through the state mirror
- Requiring a category before any store call
- The single row being edited and the view-wide submission flag
"""

import streamlit as st
from typing import Optional

from controllers.actions import ActionResult, clear_stale_choice, pop_notice, run_action
from models.entities import Category, Item
from services.state_mirror import StateMirror

NEW_NAME_KEY = "new_item_name"
NEW_CATEGORY_KEY = "new_item_category"
NEW_UNIT_KEY = "new_item_unit"
EDIT_NAME_KEY = "edit_item_name"
EDIT_CATEGORY_KEY = "edit_item_category"
EDIT_UNIT_KEY = "edit_item_unit"

MISSING_FIELDS_MESSAGE = "Item name and category are required"


class ItemController:
    """Controller for catalog item management."""

    def __init__(self, mirror: StateMirror):
        self.mirror = mirror
        self._init_session_state()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if "items_view" not in st.session_state:
            st.session_state.items_view = {
                "editing_id": None,
                "is_submitting": False,
            }

    @property
    def _state(self) -> dict:
        return st.session_state.items_view

    # ==========================================
    # Session State
    # ==========================================

    def get_items(self) -> list[Item]:
        return self.mirror.items

    def get_categories(self) -> list[Category]:
        return self.mirror.categories

    def get_category_name(self, category_id: str) -> str:
        return self.mirror.get_category_name(category_id)

    def get_category_options(self) -> list[str]:
        """Category IDs for the category pickers."""
        options = [c.id for c in self.mirror.categories]
        clear_stale_choice(NEW_CATEGORY_KEY, options)
        clear_stale_choice(EDIT_CATEGORY_KEY, options)
        return options

    def is_loading(self) -> bool:
        return self.mirror.loading

    def is_submitting(self) -> bool:
        return self._state["is_submitting"]

    def get_editing_id(self) -> Optional[str]:
        return self._state["editing_id"]

    def start_editing(self, item: Item):
        """Put a row in edit mode, pre-filled with the item's values."""
        if self.is_submitting():
            return
        self._state["editing_id"] = item.id
        st.session_state[EDIT_NAME_KEY] = item.name
        st.session_state[EDIT_CATEGORY_KEY] = item.category_id
        st.session_state[EDIT_UNIT_KEY] = item.unit or ""

    def pop_notice(self) -> Optional[ActionResult]:
        return pop_notice(self._state)

    def _reject(self, message: str) -> ActionResult:
        result = ActionResult(success=False, message=message)
        self._state["notice"] = result
        return result

    # ==========================================
    # Operations
    # ==========================================

    def add_item(self) -> ActionResult:
        """Create an item from the new-item fields."""
        name = st.session_state.get(NEW_NAME_KEY, "")
        category_id = st.session_state.get(NEW_CATEGORY_KEY)
        unit = st.session_state.get(NEW_UNIT_KEY, "")

        if not name.strip() or not category_id:
            return self._reject(MISSING_FIELDS_MESSAGE)

        result = run_action(
            self._state,
            lambda: self.mirror.add_item(name, category_id, unit),
            success_message="Item added",
            failure_message="Could not add item",
        )
        if result.success:
            st.session_state[NEW_NAME_KEY] = ""
            st.session_state[NEW_CATEGORY_KEY] = None
            st.session_state[NEW_UNIT_KEY] = ""
        return result

    def save_item(self, item_id: str) -> ActionResult:
        """Save the row being edited; edit mode ends only on success."""
        name = st.session_state.get(EDIT_NAME_KEY, "")
        category_id = st.session_state.get(EDIT_CATEGORY_KEY)
        unit = st.session_state.get(EDIT_UNIT_KEY, "")

        if not name.strip() or not category_id:
            return self._reject(MISSING_FIELDS_MESSAGE)

        result = run_action(
            self._state,
            lambda: self.mirror.edit_item(item_id, name, category_id, unit),
            success_message="Item updated",
            failure_message="Could not update item",
        )
        if result.success:
            self._state["editing_id"] = None
        return result

    def delete_item(self, item_id: str) -> ActionResult:
        """Delete an item (it is also taken off the shopping list)."""
        result = run_action(
            self._state,
            lambda: self.mirror.delete_item(item_id),
            success_message="Item deleted",
            failure_message="Could not delete item",
        )
        if result.success and self._state["editing_id"] == item_id:
            self._state["editing_id"] = None
        return result
