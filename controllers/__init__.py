"""
Controllers layer - orchestration and session state management.
"""

from controllers.actions import ActionResult, run_action
from controllers.app_controller import AppController
from controllers.category_controller import CategoryController
from controllers.item_controller import ItemController
from controllers.shopping_controller import ShoppingController

__all__ = [
    "ActionResult",
    "run_action",
    "AppController",
    "CategoryController",
    "ItemController",
    "ShoppingController",
]
