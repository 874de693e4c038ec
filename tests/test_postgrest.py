"""Tests for the PostgREST table client using httpx.MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest

from config.settings import Settings
from services.remote_store import PostgrestStore, RemoteStoreError

API_KEY = "anon-key"


def _store(handler) -> PostgrestStore:
    return PostgrestStore(
        "https://demo.supabase.co/rest/v1/",
        API_KEY,
        timeout=5.0,
        transport=httpx.MockTransport(handler),
    )


class Recorder:
    """Handler that records requests and replies with a fixed response."""

    def __init__(self, status_code: int = 200, payload=None):
        self.status_code = status_code
        self.payload = [] if payload is None else payload
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def test_from_settings_uses_rest_url():
    settings = Settings(store_url="https://demo.supabase.co/", store_key=" key ", request_timeout=12)

    store = PostgrestStore.from_settings(settings)

    assert store.rest_url == "https://demo.supabase.co/rest/v1"
    assert store.timeout == 12
    assert store.table("items").name == "items"


@pytest.mark.asyncio
async def test_select_orders_ascending_and_sends_auth_headers():
    handler = Recorder(payload=[{"id": "1", "name": "Dairy"}])
    table = _store(handler).table("categories")

    rows = await table.select("name")

    assert rows == [{"id": "1", "name": "Dairy"}]
    request = handler.last
    assert request.method == "GET"
    assert request.url.path == "/rest/v1/categories"
    assert request.url.params["select"] == "*"
    assert request.url.params["order"] == "name.asc"
    assert request.headers["apikey"] == API_KEY
    assert request.headers["Authorization"] == f"Bearer {API_KEY}"


@pytest.mark.asyncio
async def test_insert_posts_row_and_returns_representation():
    handler = Recorder(status_code=201, payload=[{"id": "7", "name": "Dairy"}])
    table = _store(handler).table("categories")

    row = await table.insert({"name": "Dairy"})

    assert row == {"id": "7", "name": "Dairy"}
    assert handler.last.method == "POST"
    assert handler.last.headers["Prefer"] == "return=representation"
    assert json.loads(handler.last.content) == [{"name": "Dairy"}]


@pytest.mark.asyncio
async def test_update_filters_by_id():
    handler = Recorder(payload=[{"id": "7", "name": "Fresh"}])
    table = _store(handler).table("categories")

    row = await table.update("7", {"name": "Fresh"})

    assert row["name"] == "Fresh"
    assert handler.last.method == "PATCH"
    assert handler.last.url.params["id"] == "eq.7"
    assert json.loads(handler.last.content) == {"name": "Fresh"}


@pytest.mark.asyncio
async def test_update_with_no_matching_row_raises():
    table = _store(Recorder(payload=[])).table("categories")

    with pytest.raises(RemoteStoreError, match="No row 7 returned"):
        await table.update("7", {"name": "Fresh"})


@pytest.mark.asyncio
async def test_delete_variants_use_expected_filters():
    handler = Recorder()
    table = _store(handler).table("shopping_list_items")

    await table.delete("3")
    await table.delete_where("item_id", "9")
    await table.delete_all()

    assert [r.method for r in handler.requests] == ["DELETE"] * 3
    assert handler.requests[0].url.params["id"] == "eq.3"
    assert handler.requests[1].url.params["item_id"] == "eq.9"
    assert handler.requests[2].url.params["id"] == "not.is.null"


@pytest.mark.asyncio
async def test_http_error_carries_postgrest_message():
    handler = Recorder(status_code=404, payload={"message": "relation does not exist", "code": "42P01"})
    table = _store(handler).table("items")

    with pytest.raises(RemoteStoreError) as exc_info:
        await table.select("name")

    error = exc_info.value
    assert error.status_code == 404
    assert error.message == "relation does not exist"
    assert error.table == "items"
    assert error.operation == "select"


@pytest.mark.asyncio
async def test_timeout_is_reported_as_store_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(RemoteStoreError, match="Request timed out"):
        await _store(handler).table("items").select("name")


@pytest.mark.asyncio
async def test_connection_error_is_reported_as_store_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(RemoteStoreError, match="Could not connect"):
        await _store(handler).table("items").select("name")


@pytest.mark.asyncio
async def test_invalid_json_is_rejected():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>oops</html>")

    with pytest.raises(RemoteStoreError, match="Invalid JSON"):
        await _store(handler).table("items").select("name")


@pytest.mark.asyncio
async def test_non_list_payload_is_rejected():
    table = _store(Recorder(payload={"id": "1"})).table("items")

    with pytest.raises(RemoteStoreError, match="Expected a list"):
        await table.select("name")
