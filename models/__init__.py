"""
Models Package - Row models and repositories for the hosted store.
"""

from models.entities import StoreRow, Category, Item, ShoppingListEntry

__all__ = ["StoreRow", "Category", "Item", "ShoppingListEntry"]
