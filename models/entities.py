"""
Pydantic Row Models

These models represent rows of the three tables in the hosted store.
Rows come back from the REST API as JSON objects; validating them here
keeps the rest of the app working with typed attributes instead of dicts.

Table Relationships:
    Category (1) ──> (*) Item (1) ──> (*) ShoppingListEntry

Foreign keys are enforced by the store, not by these models. Deleting a
category or an item can leave dependent rows behind (see StateMirror).
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class StoreRow(BaseModel):
    """Columns shared by every table: server-assigned id and timestamps."""
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Category(StoreRow):
    """A user-defined grouping of items (e.g., "Dairy")."""
    name: str


class Item(StoreRow):
    """A catalog product belonging to exactly one category."""
    name: str
    category_id: str
    unit: Optional[str] = None  # e.g., "kg", "un"


class ShoppingListEntry(StoreRow):
    """
    One item placed on the shopping list.

    There is at most one entry per item; adding the same item again
    updates this row instead of creating a second one. Quantity and
    price ranges are checked by StateMirror before writing; rows read
    back are taken as stored so one bad row cannot hide the whole list.
    """
    item_id: str
    quantity: int
    unit_price: Optional[float] = None
    purchased: bool = False

    @field_validator("purchased", mode="before")
    @classmethod
    def _null_means_not_purchased(cls, value):
        return False if value is None else value
