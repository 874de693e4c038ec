"""
State Mirror - in-memory copy of the three store tables.

The mirror owns the local categories, items and shopping list. Every
mutation makes one call to the store (through the repositories) and then
patches the local list with the row the store returned, so the cache
always matches the last successful response.

Error policy:
- Invalid input raises InvalidInputError before any store call
- Store failures are logged and re-raised as RemoteStoreError
- load_all never raises for a failed table; it records it in load_errors

This module is pure Python with no Streamlit dependencies.
"""

import asyncio
import logging
from typing import Optional

from config.settings import Settings
from models.entities import Category, Item, ShoppingListEntry
from models.repositories import CategoryRepository, ItemRepository, ShoppingListRepository
from services.errors import InvalidInputError
from services.remote_store.base import RemoteStoreError
from services.remote_store.postgrest import PostgrestStore

logger = logging.getLogger(__name__)

# Table names in the hosted store
CATEGORIES_TABLE = "categories"
ITEMS_TABLE = "items"
SHOPPING_LIST_TABLE = "shopping_list_items"


def _clean_name(name: str, label: str) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise InvalidInputError(f"{label} name is required")
    return cleaned


def _clean_unit(unit: Optional[str]) -> Optional[str]:
    cleaned = (unit or "").strip()
    return cleaned or None


def _check_quantity(quantity: int) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise InvalidInputError("Quantity must be a whole number of at least 1")


def _check_price(unit_price: Optional[float]) -> None:
    if unit_price is not None and unit_price < 0:
        raise InvalidInputError("Price cannot be negative")


class StateMirror:
    """Local mirror of the store with one method per user operation."""

    def __init__(
        self,
        categories: CategoryRepository,
        items: ItemRepository,
        shopping_list: ShoppingListRepository,
        cascade_remote_deletes: bool = False,
    ):
        """
        Initialize with one repository per table.

        Args:
            categories: Repository for the categories table
            items: Repository for the items table
            shopping_list: Repository for the shopping list table
            cascade_remote_deletes: Also delete dependent rows in the store
                when a category or item is deleted. When False, dependent
                rows are only dropped from the local lists and come back
                on the next load_all.
        """
        self._category_repo = categories
        self._item_repo = items
        self._shopping_repo = shopping_list
        self.cascade_remote_deletes = cascade_remote_deletes

        self.categories: list[Category] = []
        self.items: list[Item] = []
        self.shopping_list: list[ShoppingListEntry] = []
        self.loading = False
        self.load_errors: list[str] = []

    @classmethod
    def from_settings(cls, settings: Settings) -> "StateMirror":
        """Build a mirror backed by the PostgREST store from settings."""
        store = PostgrestStore.from_settings(settings)
        return cls(
            categories=CategoryRepository(store.table(CATEGORIES_TABLE)),
            items=ItemRepository(store.table(ITEMS_TABLE)),
            shopping_list=ShoppingListRepository(store.table(SHOPPING_LIST_TABLE)),
            cascade_remote_deletes=settings.cascade_remote_deletes,
        )

    # ==========================================
    # Loading
    # ==========================================

    async def load_all(self) -> None:
        """
        Fetch all three tables concurrently and replace the local lists.

        A table that fails to load keeps its previous contents and is
        listed in load_errors; the other tables still load.
        """
        self.loading = True
        self.load_errors = []
        try:
            await asyncio.gather(
                self._load("categories", self._category_repo),
                self._load("items", self._item_repo),
                self._load("shopping_list", self._shopping_repo),
            )
        finally:
            self.loading = False

    async def _load(self, attr: str, repo) -> None:
        try:
            rows = await repo.list_all()
        except RemoteStoreError as e:
            logger.error(f"Failed to load {attr}: {e}")
            self.load_errors.append(attr)
            return
        setattr(self, attr, rows)

    # ==========================================
    # Categories
    # ==========================================

    async def add_category(self, name: str) -> Category:
        """Create a category and append it to the local list."""
        name = _clean_name(name, "Category")
        try:
            category = await self._category_repo.create(name)
        except RemoteStoreError as e:
            logger.error(f"Failed to add category: {e}")
            raise

        self.categories = [*self.categories, category]
        return category

    async def edit_category(self, category_id: str, name: str) -> Category:
        """Rename a category."""
        name = _clean_name(name, "Category")
        try:
            updated = await self._category_repo.rename(category_id, name)
        except RemoteStoreError as e:
            logger.error(f"Failed to edit category {category_id}: {e}")
            raise

        self.categories = [
            updated if c.id == category_id else c for c in self.categories
        ]
        return updated

    async def delete_category(self, category_id: str) -> None:
        """
        Delete a category and drop its items from the local list.

        Shopping list entries for those items stay in the local list
        unless remote cascading is enabled. When it is, the category's
        items are read from the store so entries of items missing from
        the local list are deleted too.
        """
        removed_item_ids = {i.id for i in self.items if i.category_id == category_id}
        try:
            if self.cascade_remote_deletes:
                stored_items = await self._item_repo.list_all()
                removed_item_ids |= {
                    i.id for i in stored_items if i.category_id == category_id
                }
                for item_id in sorted(removed_item_ids):
                    await self._shopping_repo.delete_by_item(item_id)
                await self._item_repo.delete_by_category(category_id)
            await self._category_repo.delete(category_id)
        except RemoteStoreError as e:
            logger.error(f"Failed to delete category {category_id}: {e}")
            raise

        self.categories = [c for c in self.categories if c.id != category_id]
        self.items = [i for i in self.items if i.category_id != category_id]
        if self.cascade_remote_deletes:
            self.shopping_list = [
                e for e in self.shopping_list if e.item_id not in removed_item_ids
            ]

    # ==========================================
    # Items
    # ==========================================

    async def add_item(
        self,
        name: str,
        category_id: str,
        unit: Optional[str] = None
    ) -> Item:
        """Create a catalog item and append it to the local list."""
        name = _clean_name(name, "Item")
        try:
            item = await self._item_repo.create(name, category_id, _clean_unit(unit))
        except RemoteStoreError as e:
            logger.error(f"Failed to add item: {e}")
            raise

        self.items = [*self.items, item]
        return item

    async def edit_item(
        self,
        item_id: str,
        name: str,
        category_id: str,
        unit: Optional[str] = None
    ) -> Item:
        """Update an item's name, category and unit."""
        name = _clean_name(name, "Item")
        try:
            updated = await self._item_repo.update(
                item_id, name, category_id, _clean_unit(unit)
            )
        except RemoteStoreError as e:
            logger.error(f"Failed to edit item {item_id}: {e}")
            raise

        self.items = [updated if i.id == item_id else i for i in self.items]
        return updated

    async def delete_item(self, item_id: str) -> None:
        """Delete an item and drop its shopping list entries locally."""
        try:
            if self.cascade_remote_deletes:
                await self._shopping_repo.delete_by_item(item_id)
            await self._item_repo.delete(item_id)
        except RemoteStoreError as e:
            logger.error(f"Failed to delete item {item_id}: {e}")
            raise

        self.items = [i for i in self.items if i.id != item_id]
        self.shopping_list = [e for e in self.shopping_list if e.item_id != item_id]

    # ==========================================
    # Shopping List
    # ==========================================

    async def add_to_shopping_list(
        self,
        item_id: str,
        quantity: int,
        unit_price: Optional[float] = None
    ) -> ShoppingListEntry:
        """
        Put an item on the list.

        If the item is already listed, its entry gets the new quantity and
        price and keeps its purchased flag; no second entry is created.
        """
        _check_quantity(quantity)
        _check_price(unit_price)

        existing = self.find_entry_for_item(item_id)
        if existing:
            return await self.update_shopping_list_item(
                existing.id, quantity, unit_price, existing.purchased
            )

        try:
            entry = await self._shopping_repo.add_entry(item_id, quantity, unit_price)
        except RemoteStoreError as e:
            logger.error(f"Failed to add item {item_id} to shopping list: {e}")
            raise

        self.shopping_list = [*self.shopping_list, entry]
        return entry

    async def update_shopping_list_item(
        self,
        entry_id: str,
        quantity: int,
        unit_price: Optional[float] = None,
        purchased: Optional[bool] = None
    ) -> ShoppingListEntry:
        """
        Update a list entry.

        Args:
            entry_id: ID of the shopping list entry
            quantity: New quantity (>= 1)
            unit_price: New price, or None to clear it
            purchased: New purchased flag, or None to leave it unchanged
        """
        _check_quantity(quantity)
        _check_price(unit_price)
        try:
            updated = await self._shopping_repo.update_entry(
                entry_id, quantity, unit_price, purchased
            )
        except RemoteStoreError as e:
            logger.error(f"Failed to update shopping list entry {entry_id}: {e}")
            raise

        self.shopping_list = [
            updated if e.id == entry_id else e for e in self.shopping_list
        ]
        return updated

    async def remove_from_shopping_list(self, entry_id: str) -> None:
        """Remove one entry from the list."""
        try:
            await self._shopping_repo.delete(entry_id)
        except RemoteStoreError as e:
            logger.error(f"Failed to remove shopping list entry {entry_id}: {e}")
            raise

        self.shopping_list = [e for e in self.shopping_list if e.id != entry_id]

    async def clear_shopping_list(self) -> None:
        """Remove every entry from the list."""
        try:
            await self._shopping_repo.clear()
        except RemoteStoreError as e:
            logger.error(f"Failed to clear shopping list: {e}")
            raise

        self.shopping_list = []

    # ==========================================
    # Lookups
    # ==========================================

    def get_category(self, category_id: str) -> Optional[Category]:
        return next((c for c in self.categories if c.id == category_id), None)

    def get_category_name(self, category_id: str) -> str:
        """Name of a category, or an empty string if it is not loaded."""
        category = self.get_category(category_id)
        return category.name if category else ""

    def get_item(self, item_id: str) -> Optional[Item]:
        return next((i for i in self.items if i.id == item_id), None)

    def find_entry_for_item(self, item_id: str) -> Optional[ShoppingListEntry]:
        return next((e for e in self.shopping_list if e.item_id == item_id), None)
