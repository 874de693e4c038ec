"""
Category View - UI for managing product categories.

This view handles:
- Adding categories
- Renaming a category in place (click Edit, then Save)
- Deleting categories
"""

import streamlit as st

from controllers.category_controller import CategoryController, EDIT_NAME_KEY, NEW_NAME_KEY
from models.entities import Category
from services.state_mirror import StateMirror
from views.components.notice import render_notice


class CategoryView:
    """View for category management UI."""

    def __init__(self, mirror: StateMirror):
        self.controller = CategoryController(mirror)

    def render(self):
        """Main render method."""
        render_notice(self.controller.pop_notice())

        if self.controller.is_loading():
            st.info("Loading categories...")
            return

        st.markdown("### Categories")
        self._render_add_form()

        st.markdown("---")

        categories = self.controller.get_categories()
        if not categories:
            st.info("No categories yet. Add one above to start your catalog.")
            return

        for category in categories:
            self._render_category_row(category)

    def _render_add_form(self):
        """Render the new category input."""
        disabled = self.controller.is_submitting()
        col_name, col_add = st.columns([4, 1])

        with col_name:
            st.text_input(
                "Category name",
                key=NEW_NAME_KEY,
                placeholder="Category name",
                disabled=disabled,
                label_visibility="collapsed",
            )
        with col_add:
            st.button(
                "Add",
                type="primary",
                on_click=self.controller.add_category,
                disabled=disabled,
                use_container_width=True,
            )

    def _render_category_row(self, category: Category):
        """Render one category, as text or as an edit field."""
        disabled = self.controller.is_submitting()
        is_editing = self.controller.get_editing_id() == category.id

        col_name, col_action, col_delete = st.columns([5, 1, 0.6])

        with col_name:
            if is_editing:
                st.text_input(
                    "Category name",
                    key=EDIT_NAME_KEY,
                    disabled=disabled,
                    label_visibility="collapsed",
                )
            else:
                st.markdown(f"**{category.name}**")

        with col_action:
            if is_editing:
                st.button(
                    "Save",
                    key=f"save_category_{category.id}",
                    type="primary",
                    on_click=self.controller.save_category,
                    args=(category.id,),
                    disabled=disabled,
                    use_container_width=True,
                )
            else:
                st.button(
                    "Edit",
                    key=f"edit_category_{category.id}",
                    on_click=self.controller.start_editing,
                    args=(category,),
                    disabled=disabled,
                    use_container_width=True,
                )

        with col_delete:
            st.button(
                "🗑️",
                key=f"delete_category_{category.id}",
                help="Delete category and its items",
                on_click=self.controller.delete_category,
                args=(category.id,),
                disabled=disabled,
            )
