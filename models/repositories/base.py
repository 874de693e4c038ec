"""
Base repository - shared plumbing for the table repositories.

Repositories turn raw store rows into row models. A row that does not
validate is treated like any other store failure so callers only ever
handle RemoteStoreError.
"""

from datetime import datetime, timezone
from typing import Generic, TypeVar

from pydantic import ValidationError

from models.entities import StoreRow
from services.remote_store.base import RemoteStoreError, RemoteTable, Row

ModelT = TypeVar("ModelT", bound=StoreRow)


def utc_now_iso() -> str:
    """Timestamp sent as updated_at on every update."""
    return datetime.now(timezone.utc).isoformat()


class TableRepository(Generic[ModelT]):
    """Typed access to one RemoteTable."""

    model: type[ModelT]
    order_by: str = "created_at"

    def __init__(self, table: RemoteTable):
        """Initialize with the table client."""
        self.table = table

    async def list_all(self) -> list[ModelT]:
        """Get every row, ordered by the repository's order column."""
        rows = await self.table.select(self.order_by)
        return [self._to_model(row, "select") for row in rows]

    async def delete(self, row_id: str) -> None:
        """Delete a row by id."""
        await self.table.delete(row_id)

    async def _insert(self, values: Row) -> ModelT:
        row = await self.table.insert(values)
        return self._to_model(row, "insert")

    async def _update(self, row_id: str, values: Row) -> ModelT:
        row = await self.table.update(row_id, values)
        return self._to_model(row, "update")

    def _to_model(self, row: Row, operation: str) -> ModelT:
        try:
            return self.model.model_validate(row)
        except ValidationError as e:
            raise RemoteStoreError(
                self.table.name, operation, f"Unexpected row shape: {e.error_count()} errors"
            ) from e
