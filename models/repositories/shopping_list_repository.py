"""
Shopping List Repository - Data access for shopping list entries.

This repository handles all store operations on the shopping_list_items
table: listing, adding, updating, removing and clearing entries.
"""

from typing import Optional

from models.entities import ShoppingListEntry
from models.repositories.base import TableRepository, utc_now_iso


class ShoppingListRepository(TableRepository[ShoppingListEntry]):
    """Repository for shopping list entry rows."""

    model = ShoppingListEntry
    order_by = "created_at"

    async def add_entry(
        self,
        item_id: str,
        quantity: int,
        unit_price: Optional[float] = None
    ) -> ShoppingListEntry:
        """Add an item to the list, not yet purchased."""
        return await self._insert({
            "item_id": item_id,
            "quantity": quantity,
            "unit_price": unit_price,
            "purchased": False,
        })

    async def update_entry(
        self,
        entry_id: str,
        quantity: int,
        unit_price: Optional[float] = None,
        purchased: Optional[bool] = None
    ) -> ShoppingListEntry:
        """
        Update an entry.

        Quantity and price are always sent (a None price clears it).
        Purchased is only sent when given, so callers can change the
        quantity without touching the checkbox state.
        """
        values = {
            "quantity": quantity,
            "unit_price": unit_price,
            "updated_at": utc_now_iso(),
        }
        if purchased is not None:
            values["purchased"] = purchased

        return await self._update(entry_id, values)

    async def clear(self) -> None:
        """Remove every entry from the list."""
        await self.table.delete_all()

    async def delete_by_item(self, item_id: str) -> None:
        """Remove every entry that references an item."""
        await self.table.delete_where("item_id", item_id)
