"""
Base interface for the hosted table store.

The app never talks to the store directly: the state mirror goes through
one RemoteTable per collection, so any backend exposing these operations
can be swapped in (tests use an in-memory table).
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

Row = dict[str, Any]


class RemoteStoreError(Exception):
    """A call to the hosted store failed (network, server or payload error)."""

    def __init__(
        self,
        table: str,
        operation: str,
        message: str,
        status_code: Optional[int] = None,
    ):
        self.table = table
        self.operation = operation
        self.message = message
        self.status_code = status_code
        super().__init__(f"{operation} on '{table}' failed: {message}")


class RemoteTable(ABC):
    """Abstract CRUD interface over one collection of the hosted store."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the table name (e.g., 'categories')."""
        pass

    @abstractmethod
    async def select(self, order_by: str) -> list[Row]:
        """Return every row ordered ascending by a column."""
        pass

    @abstractmethod
    async def insert(self, row: Row) -> Row:
        """
        Insert a row.

        Args:
            row: Column values; id and timestamps are assigned by the store

        Returns:
            The fully populated inserted row
        """
        pass

    @abstractmethod
    async def update(self, row_id: str, fields: Row) -> Row:
        """Update a row by id and return it. Raises if nothing matched."""
        pass

    @abstractmethod
    async def delete(self, row_id: str) -> None:
        """Delete a row by id."""
        pass

    @abstractmethod
    async def delete_all(self) -> None:
        """Delete every row in the table."""
        pass

    @abstractmethod
    async def delete_where(self, column: str, value: Any) -> None:
        """Delete every row whose column equals value."""
        pass
