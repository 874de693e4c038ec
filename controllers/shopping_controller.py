"""
Shopping Controller - manages the shopping list tab.

This controller handles:
- Adding items to the list (or updating them if already listed)
- In-place quantity / price editing with the live-typing field parsers
- Purchased toggles, removal and clearing the list
- The category filter and the totals shown under the list
"""

import streamlit as st
from typing import Optional

from config.settings import get_settings
from controllers.actions import ActionResult, clear_stale_choice, pop_notice, run_action
from models.entities import Category, Item, ShoppingListEntry
from services.errors import InvalidInputError
from services.field_parsers import (
    PriceField,
    QuantityField,
    apply_text,
    format_price,
    parse_price_input,
    parse_quantity_input,
)
from services.shopping_list_service import (
    ALL_CATEGORIES,
    ShoppingRow,
    ShoppingTotals,
    build_rows,
    calculate_totals,
    filter_entries,
    format_currency,
)
from services.state_mirror import StateMirror

NEW_ITEM_KEY = "new_entry_item"
NEW_QUANTITY_KEY = "new_entry_quantity"
NEW_PRICE_KEY = "new_entry_price"
CATEGORY_FILTER_KEY = "shopping_category_filter"

UPDATE_FAILED_MESSAGE = "Could not update item"


def quantity_key(entry_id: str) -> str:
    return f"qty_{entry_id}"


def price_key(entry_id: str) -> str:
    return f"price_{entry_id}"


def purchased_key(entry_id: str) -> str:
    return f"purchased_{entry_id}"


class ShoppingController:
    """Controller for the shopping list."""

    def __init__(self, mirror: StateMirror):
        self.mirror = mirror
        self.settings = get_settings()
        self._init_session_state()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if "shopping_view" not in st.session_state:
            st.session_state.shopping_view = {
                "is_submitting": False,
            }
        if CATEGORY_FILTER_KEY not in st.session_state:
            st.session_state[CATEGORY_FILTER_KEY] = ALL_CATEGORIES

    @property
    def _state(self) -> dict:
        return st.session_state.shopping_view

    # ==========================================
    # Session State
    # ==========================================

    def is_loading(self) -> bool:
        return self.mirror.loading

    def is_submitting(self) -> bool:
        return self._state["is_submitting"]

    def pop_notice(self) -> Optional[ActionResult]:
        return pop_notice(self._state)

    def get_items(self) -> list[Item]:
        return self.mirror.items

    def get_categories(self) -> list[Category]:
        return self.mirror.categories

    def has_entries(self) -> bool:
        return bool(self.mirror.shopping_list)

    def get_item_options(self) -> list[str]:
        """Item IDs for the add-to-list picker."""
        options = [i.id for i in self.mirror.items]
        clear_stale_choice(NEW_ITEM_KEY, options)
        return options

    def get_item_label(self, item_id: str) -> str:
        """Label for the item picker: 'name (category)'."""
        item = self.mirror.get_item(item_id)
        if not item:
            return item_id
        return f"{item.name} ({self.mirror.get_category_name(item.category_id)})"

    def get_category_filter(self) -> str:
        return st.session_state.get(CATEGORY_FILTER_KEY, ALL_CATEGORIES)

    def get_filter_options(self) -> list[str]:
        """Filter choices: ALL_CATEGORIES followed by every category ID."""
        options = [ALL_CATEGORIES] + [c.id for c in self.mirror.categories]
        # The filtered category may have been deleted since the last run
        if self.get_category_filter() not in options:
            st.session_state[CATEGORY_FILTER_KEY] = ALL_CATEGORIES
        return options

    def get_filter_label(self, value: str) -> str:
        if value == ALL_CATEGORIES:
            return "All categories"
        return self.mirror.get_category_name(value)

    # ==========================================
    # Derived Values
    # ==========================================

    def get_filtered_entries(self) -> list[ShoppingListEntry]:
        category_filter = self.get_category_filter()
        if self.mirror.get_category(category_filter) is None:
            category_filter = ALL_CATEGORIES
        return filter_entries(self.mirror.shopping_list, self.mirror.items, category_filter)

    def get_rows(self) -> list[ShoppingRow]:
        """Display rows for the filtered entries, with widget state synced."""
        rows = build_rows(
            self.get_filtered_entries(),
            self.mirror.items,
            self.mirror.categories,
        )
        for row in rows:
            if quantity_key(row.entry.id) not in st.session_state:
                self._sync_entry_widgets(row.entry)
        return rows

    def get_totals(self) -> ShoppingTotals:
        return calculate_totals(self.get_filtered_entries())

    def format_money(self, value: float) -> str:
        return format_currency(value, self.settings.currency_symbol)

    def _sync_entry_widgets(self, entry: ShoppingListEntry):
        """Make an entry's input widgets show its stored values."""
        st.session_state[quantity_key(entry.id)] = str(entry.quantity)
        st.session_state[price_key(entry.id)] = format_price(entry.unit_price)
        st.session_state[purchased_key(entry.id)] = entry.purchased

    def _find_entry(self, entry_id: str) -> Optional[ShoppingListEntry]:
        return next((e for e in self.mirror.shopping_list if e.id == entry_id), None)

    # ==========================================
    # Operations
    # ==========================================

    def add_to_list(self) -> ActionResult:
        """Add the selected item with the typed quantity and price."""
        item_id = st.session_state.get(NEW_ITEM_KEY)
        if not item_id:
            result = ActionResult(success=False, message="Select an item")
            self._state["notice"] = result
            return result

        try:
            quantity = parse_quantity_input(st.session_state.get(NEW_QUANTITY_KEY, ""))
            unit_price = parse_price_input(st.session_state.get(NEW_PRICE_KEY, ""))
        except InvalidInputError as e:
            result = ActionResult(success=False, message=str(e))
            self._state["notice"] = result
            return result

        result = run_action(
            self._state,
            lambda: self.mirror.add_to_shopping_list(item_id, quantity, unit_price),
            success_message="Item added to the list",
            failure_message="Could not add item to the list",
        )
        if result.success:
            st.session_state[NEW_ITEM_KEY] = None
            st.session_state[NEW_QUANTITY_KEY] = ""
            st.session_state[NEW_PRICE_KEY] = ""
            entry = self.mirror.find_entry_for_item(item_id)
            if entry:
                self._sync_entry_widgets(entry)
        return result

    def _update_entry(
        self,
        entry: ShoppingListEntry,
        quantity: int,
        unit_price: Optional[float],
        purchased: bool,
    ) -> ActionResult:
        result = run_action(
            self._state,
            lambda: self.mirror.update_shopping_list_item(
                entry.id, quantity, unit_price, purchased
            ),
            success_message="Item updated",
            failure_message=UPDATE_FAILED_MESSAGE,
        )
        updated = self._find_entry(entry.id)
        if updated:
            self._sync_entry_widgets(updated)
        if result.success:
            # Routine edits do not need a toast
            self._state.pop("notice", None)
        return result

    def toggle_purchased(self, entry_id: str) -> Optional[ActionResult]:
        """Save the purchased checkbox of an entry."""
        entry = self._find_entry(entry_id)
        if not entry:
            return None
        checked = bool(st.session_state.get(purchased_key(entry_id)))
        return self._update_entry(entry, entry.quantity, entry.unit_price, checked)

    def change_quantity(self, entry_id: str) -> Optional[ActionResult]:
        """Apply the final text of an entry's quantity field."""
        entry = self._find_entry(entry_id)
        if not entry:
            return None

        field = QuantityField(entry.quantity)
        commit = apply_text(field, st.session_state.get(quantity_key(entry_id), ""))
        st.session_state[quantity_key(entry_id)] = field.text

        if commit is None:
            return None
        return self._update_entry(entry, commit.value, entry.unit_price, entry.purchased)

    def change_price(self, entry_id: str) -> Optional[ActionResult]:
        """Apply the final text of an entry's price field."""
        entry = self._find_entry(entry_id)
        if not entry:
            return None

        field = PriceField(entry.unit_price)
        commit = apply_text(field, st.session_state.get(price_key(entry_id), ""))
        st.session_state[price_key(entry_id)] = field.text

        if commit is None:
            return None
        return self._update_entry(entry, entry.quantity, commit.value, entry.purchased)

    def remove_entry(self, entry_id: str) -> ActionResult:
        """Take one entry off the list."""
        return run_action(
            self._state,
            lambda: self.mirror.remove_from_shopping_list(entry_id),
            success_message="Item removed from the list",
            failure_message="Could not remove item",
        )

    def clear_list(self) -> ActionResult:
        """Remove every entry from the list."""
        return run_action(
            self._state,
            self.mirror.clear_shopping_list,
            success_message="All items were removed from the list",
            failure_message="Could not clear the list",
        )
