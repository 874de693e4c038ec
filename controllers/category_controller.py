"""
Category Controller - manages the categories tab.

This controller handles:
- Adding, renaming and deleting categories through the state mirror
- The single row being edited
- The view-wide submission flag
"""

import streamlit as st
from typing import Optional

from controllers.actions import ActionResult, pop_notice, run_action
from models.entities import Category
from services.state_mirror import StateMirror

NEW_NAME_KEY = "new_category_name"
EDIT_NAME_KEY = "edit_category_name"


class CategoryController:
    """Controller for category management."""

    def __init__(self, mirror: StateMirror):
        self.mirror = mirror
        self._init_session_state()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if "categories_view" not in st.session_state:
            st.session_state.categories_view = {
                "editing_id": None,
                "is_submitting": False,
            }

    @property
    def _state(self) -> dict:
        return st.session_state.categories_view

    # ==========================================
    # Session State
    # ==========================================

    def get_categories(self) -> list[Category]:
        return self.mirror.categories

    def is_loading(self) -> bool:
        return self.mirror.loading

    def is_submitting(self) -> bool:
        return self._state["is_submitting"]

    def get_editing_id(self) -> Optional[str]:
        return self._state["editing_id"]

    def start_editing(self, category: Category):
        """Put a row in edit mode, pre-filled with its current name."""
        if self.is_submitting():
            return
        self._state["editing_id"] = category.id
        st.session_state[EDIT_NAME_KEY] = category.name

    def pop_notice(self) -> Optional[ActionResult]:
        return pop_notice(self._state)

    # ==========================================
    # Operations
    # ==========================================

    def add_category(self) -> ActionResult:
        """Create a category from the new-name field."""
        name = st.session_state.get(NEW_NAME_KEY, "")
        result = run_action(
            self._state,
            lambda: self.mirror.add_category(name),
            success_message="Category added",
            failure_message="Could not add category",
        )
        if result.success:
            st.session_state[NEW_NAME_KEY] = ""
        return result

    def save_category(self, category_id: str) -> ActionResult:
        """Save the row being edited; edit mode ends only on success."""
        name = st.session_state.get(EDIT_NAME_KEY, "")
        result = run_action(
            self._state,
            lambda: self.mirror.edit_category(category_id, name),
            success_message="Category updated",
            failure_message="Could not update category",
        )
        if result.success:
            self._state["editing_id"] = None
            st.session_state[EDIT_NAME_KEY] = ""
        return result

    def delete_category(self, category_id: str) -> ActionResult:
        """Delete a category (its items disappear from the catalog too)."""
        result = run_action(
            self._state,
            lambda: self.mirror.delete_category(category_id),
            success_message="Category deleted",
            failure_message="Could not delete category",
        )
        if result.success and self._state["editing_id"] == category_id:
            self._state["editing_id"] = None
        return result
