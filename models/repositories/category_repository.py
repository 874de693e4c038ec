"""
Category Repository - Data access for the categories table.
"""

from models.entities import Category
from models.repositories.base import TableRepository, utc_now_iso


class CategoryRepository(TableRepository[Category]):
    """Repository for category rows."""

    model = Category
    order_by = "name"

    async def create(self, name: str) -> Category:
        """Insert a category and return the stored row."""
        return await self._insert({"name": name})

    async def rename(self, category_id: str, name: str) -> Category:
        """Rename a category and refresh its updated_at."""
        return await self._update(
            category_id,
            {"name": name, "updated_at": utc_now_iso()},
        )
