"""
Repositories - Data access layer for the hosted store tables.
"""

from models.repositories.category_repository import CategoryRepository
from models.repositories.item_repository import ItemRepository
from models.repositories.shopping_list_repository import ShoppingListRepository

__all__ = ["CategoryRepository", "ItemRepository", "ShoppingListRepository"]
