"""
Reusable UI components.
"""

from views.components.navigation import render_navigation
from views.components.notice import render_notice
from views.components.shopping_entry import (
    render_shopping_entry_row,
    render_shopping_table_header,
)
from views.components.shopping_totals import render_shopping_totals

__all__ = [
    # Shell
    "render_navigation",
    "render_notice",
    # Shopping
    "render_shopping_entry_row",
    "render_shopping_table_header",
    "render_shopping_totals",
]
