"""
Item Repository - Data access for the items table.
"""

from typing import Optional

from models.entities import Item
from models.repositories.base import TableRepository, utc_now_iso


class ItemRepository(TableRepository[Item]):
    """Repository for catalog item rows."""

    model = Item
    order_by = "name"

    async def create(
        self,
        name: str,
        category_id: str,
        unit: Optional[str] = None
    ) -> Item:
        """
        Insert an item.

        Args:
            name: Item name (already trimmed)
            category_id: ID of the owning category
            unit: Optional unit of measure (e.g., 'kg')
        """
        return await self._insert({
            "name": name,
            "category_id": category_id,
            "unit": unit,
        })

    async def update(
        self,
        item_id: str,
        name: str,
        category_id: str,
        unit: Optional[str] = None
    ) -> Item:
        """Replace an item's name, category and unit."""
        return await self._update(item_id, {
            "name": name,
            "category_id": category_id,
            "unit": unit,
            "updated_at": utc_now_iso(),
        })

    async def delete_by_category(self, category_id: str) -> None:
        """Delete every item of a category."""
        await self.table.delete_where("category_id", category_id)
