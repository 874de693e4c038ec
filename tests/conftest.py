"""Shared pytest fixtures for the Checkmarket test suite."""

from __future__ import annotations

import itertools
from datetime import datetime, timedelta, timezone
from typing import Any, Optional
from uuid import uuid4

import pytest

from config.settings import get_settings
from models.repositories import CategoryRepository, ItemRepository, ShoppingListRepository
from services.remote_store.base import RemoteStoreError, RemoteTable, Row
from services.state_mirror import (
    CATEGORIES_TABLE,
    ITEMS_TABLE,
    SHOPPING_LIST_TABLE,
    StateMirror,
)

_EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


class InMemoryTable(RemoteTable):
    """RemoteTable keeping rows in a list, with call recording and failure injection."""

    _clock = itertools.count()

    def __init__(self, name: str):
        self._name = name
        self.rows: list[Row] = []
        self.calls: list[tuple[str, Any]] = []
        self.failing: set[str] = set()

    @property
    def name(self) -> str:
        return self._name

    def fail_on(self, *operations: str) -> None:
        self.failing.update(operations)

    def _record(self, operation: str, payload: Any = None) -> None:
        self.calls.append((operation, payload))
        if operation in self.failing:
            raise RemoteStoreError(self._name, operation, "Injected failure", status_code=500)

    def seed(self, **values: Any) -> Row:
        """Insert a row directly, without recording a call."""
        row = self._new_row(values)
        self.rows.append(row)
        return dict(row)

    def _new_row(self, values: Row) -> Row:
        created_at = _EPOCH + timedelta(seconds=next(self._clock))
        return {
            "id": str(uuid4()),
            "created_at": created_at.isoformat(),
            "updated_at": None,
            **values,
        }

    async def select(self, order_by: str) -> list[Row]:
        self._record("select", order_by)
        return [dict(r) for r in sorted(self.rows, key=lambda r: r.get(order_by) or "")]

    async def insert(self, row: Row) -> Row:
        self._record("insert", dict(row))
        stored = self._new_row(row)
        self.rows.append(stored)
        return dict(stored)

    async def update(self, row_id: str, fields: Row) -> Row:
        self._record("update", (row_id, dict(fields)))
        for row in self.rows:
            if row["id"] == row_id:
                row.update(fields)
                return dict(row)
        raise RemoteStoreError(self._name, "update", f"No row {row_id} returned")

    async def delete(self, row_id: str) -> None:
        self._record("delete", row_id)
        self.rows = [r for r in self.rows if r["id"] != row_id]

    async def delete_all(self) -> None:
        self._record("delete_all")
        self.rows = []

    async def delete_where(self, column: str, value: Any) -> None:
        self._record("delete_where", (column, value))
        self.rows = [r for r in self.rows if r.get(column) != value]

    def operations(self) -> list[str]:
        return [operation for operation, _ in self.calls]


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; reset them around every test."""

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def tables() -> dict[str, InMemoryTable]:
    return {
        CATEGORIES_TABLE: InMemoryTable(CATEGORIES_TABLE),
        ITEMS_TABLE: InMemoryTable(ITEMS_TABLE),
        SHOPPING_LIST_TABLE: InMemoryTable(SHOPPING_LIST_TABLE),
    }


def build_mirror(tables: dict[str, InMemoryTable], cascade: bool = False) -> StateMirror:
    return StateMirror(
        categories=CategoryRepository(tables[CATEGORIES_TABLE]),
        items=ItemRepository(tables[ITEMS_TABLE]),
        shopping_list=ShoppingListRepository(tables[SHOPPING_LIST_TABLE]),
        cascade_remote_deletes=cascade,
    )


@pytest.fixture()
def mirror(tables) -> StateMirror:
    return build_mirror(tables)


@pytest.fixture()
def cascading_mirror(tables) -> StateMirror:
    return build_mirror(tables, cascade=True)


@pytest.fixture()
def seeded(tables) -> dict[str, Row]:
    """One category, two items and one list entry already in the store."""

    dairy = tables[CATEGORIES_TABLE].seed(name="Dairy")
    milk = tables[ITEMS_TABLE].seed(name="Milk", category_id=dairy["id"], unit="l")
    cheese = tables[ITEMS_TABLE].seed(name="Cheese", category_id=dairy["id"], unit=None)
    entry = tables[SHOPPING_LIST_TABLE].seed(
        item_id=milk["id"], quantity=2, unit_price=4.5, purchased=False
    )
    return {"dairy": dairy, "milk": milk, "cheese": cheese, "entry": entry}


def find_row(table: InMemoryTable, row_id: str) -> Optional[Row]:
    return next((r for r in table.rows if r["id"] == row_id), None)
