"""
Views layer - UI presentation components.
"""

from views.category_view import CategoryView
from views.item_view import ItemView
from views.shopping_view import ShoppingView

__all__ = ["CategoryView", "ItemView", "ShoppingView"]
