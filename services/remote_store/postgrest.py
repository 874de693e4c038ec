"""
PostgREST client for the hosted table store.

Supabase exposes every table of the project database through PostgREST:
https://postgrest.org/en/stable/references/api/tables_views.html

Authentication: project API key
- Sent both as the `apikey` header and as a bearer token

Requests used:
- GET    /rest/v1/{table}?select=*&order={column}.asc
- POST   /rest/v1/{table}                  (Prefer: return=representation)
- PATCH  /rest/v1/{table}?id=eq.{id}       (Prefer: return=representation)
- DELETE /rest/v1/{table}?id=eq.{id}
- DELETE /rest/v1/{table}?id=not.is.null   (every row)
"""

import logging
from typing import Any, Optional

import httpx

from config.settings import Settings
from services.remote_store.base import RemoteStoreError, RemoteTable, Row

logger = logging.getLogger(__name__)


class PostgrestStore:
    """Connection details shared by every table of one PostgREST endpoint."""

    def __init__(
        self,
        rest_url: str,
        api_key: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.rest_url = rest_url.rstrip("/")
        self._api_key = api_key.strip()
        self.timeout = timeout
        # Tests inject httpx.MockTransport here
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "PostgrestStore":
        """Build a store from application settings."""
        return cls(
            rest_url=settings.rest_url,
            api_key=settings.store_key,
            timeout=settings.request_timeout,
        )

    def table(self, name: str) -> "PostgrestTable":
        """Get a client for one table."""
        return PostgrestTable(self, name)

    def _headers(self, prefer: Optional[str] = None) -> dict[str, str]:
        headers = {
            "apikey": self._api_key,
            "Authorization": f"Bearer {self._api_key}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if prefer:
            headers["Prefer"] = prefer
        return headers

    async def request(
        self,
        table: str,
        operation: str,
        method: str,
        params: Optional[dict[str, str]] = None,
        json: Any = None,
        prefer: Optional[str] = None,
    ) -> httpx.Response:
        """
        Send one request to a table endpoint.

        A new client is opened per call: Streamlit callers run each
        operation in its own event loop, and a pooled AsyncClient cannot
        outlive the loop it was created in.

        Raises:
            RemoteStoreError: on transport errors, timeouts and non-2xx responses
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(
                    method,
                    f"{self.rest_url}/{table}",
                    params=params,
                    json=json,
                    headers=self._headers(prefer),
                )
                response.raise_for_status()
            return response

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            message = _error_message(e.response)
            logger.error(f"Store {operation} on {table} failed: {status} - {message}")
            raise RemoteStoreError(table, operation, message, status_code=status) from e
        except httpx.TimeoutException as e:
            logger.error(f"Store {operation} on {table} timed out")
            raise RemoteStoreError(table, operation, "Request timed out") from e
        except httpx.RequestError as e:
            logger.error(f"Store {operation} on {table} could not connect: {e}")
            raise RemoteStoreError(table, operation, "Could not connect to the store") from e


class PostgrestTable(RemoteTable):
    """RemoteTable backed by one PostgREST table endpoint."""

    RETURN_ROWS = "return=representation"

    def __init__(self, store: PostgrestStore, name: str):
        self.store = store
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    async def select(self, order_by: str) -> list[Row]:
        response = await self.store.request(
            self._name,
            "select",
            "GET",
            params={"select": "*", "order": f"{order_by}.asc"},
        )
        return self._rows(response, "select")

    async def insert(self, row: Row) -> Row:
        response = await self.store.request(
            self._name,
            "insert",
            "POST",
            json=[row],
            prefer=self.RETURN_ROWS,
        )
        return self._single(response, "insert")

    async def update(self, row_id: str, fields: Row) -> Row:
        response = await self.store.request(
            self._name,
            "update",
            "PATCH",
            params={"id": f"eq.{row_id}"},
            json=fields,
            prefer=self.RETURN_ROWS,
        )
        return self._single(response, "update", row_id=row_id)

    async def delete(self, row_id: str) -> None:
        await self.store.request(
            self._name,
            "delete",
            "DELETE",
            params={"id": f"eq.{row_id}"},
        )

    async def delete_all(self) -> None:
        # ids are never null, so this filter matches every row
        await self.store.request(
            self._name,
            "delete_all",
            "DELETE",
            params={"id": "not.is.null"},
        )

    async def delete_where(self, column: str, value: Any) -> None:
        await self.store.request(
            self._name,
            "delete_where",
            "DELETE",
            params={column: f"eq.{value}"},
        )

    def _rows(self, response: httpx.Response, operation: str) -> list[Row]:
        """Decode a JSON array of rows from a response."""
        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Store {operation} on {self._name} returned invalid JSON")
            raise RemoteStoreError(self._name, operation, "Invalid JSON response") from e

        if not isinstance(data, list):
            raise RemoteStoreError(self._name, operation, "Expected a list of rows")
        return data

    def _single(
        self,
        response: httpx.Response,
        operation: str,
        row_id: Optional[str] = None,
    ) -> Row:
        """Return the one row a write with return=representation sends back."""
        rows = self._rows(response, operation)
        if not rows:
            target = f"row {row_id}" if row_id else "row"
            raise RemoteStoreError(self._name, operation, f"No {target} returned")
        return rows[0]


def _error_message(response: httpx.Response) -> str:
    """Extract PostgREST's error message ({message, code, details, hint})."""
    try:
        payload = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"

    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return response.text or f"HTTP {response.status_code}"
