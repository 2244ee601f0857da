"""
Design (store.py)
- Purpose: The ShopStore contract and its hosted-table backend (Supabase REST / PostgREST).
- Inputs: Base URL, anon key, table name, timeout.
- Outputs: list[Shop] for list(); None for insert()/delete_by_id().
- Side effects: HTTP requests through a shared httpx.Client.
- Errors: Every failure (HTTP status, transport, malformed body) is raised as StoreOperationFailed.
- Thread-safety: httpx.Client is safe to share; the controller issues one request at a time anyway.
"""

import logging
from typing import Any, Protocol

import httpx

from .errors import StoreOperationFailed
from .models import Shop

log = logging.getLogger(__name__)


class ShopStore(Protocol):
    """Table of shops. Implementations raise StoreOperationFailed on any failure."""

    def list(self) -> list[Shop]: ...
    def insert(self, name: str, favorite_color: str) -> None: ...
    def delete_by_id(self, shop_id: int) -> None: ...


class SupabaseShopStore:
    """
    Design (SupabaseShopStore)
    - Endpoint: <url>/rest/v1/<table>, authenticated with the project's anon key.
    - list():   GET    ?select=*&order=created_at.desc
    - insert(): POST   [{"name", "favorite_color"}] with Prefer: return=minimal
    - delete_by_id(): DELETE ?id=eq.<id> (absent ids are not an error for PostgREST)
    """

    def __init__(self, url: str, key: str, table: str = "Shops", timeout: float = 10.0,
                 transport: httpx.BaseTransport | None = None):
        if not url:
            raise ValueError("Supabase URL is required")
        if not key:
            raise ValueError("Supabase key is required")
        self.table = table
        self._client = httpx.Client(
            base_url=f"{url.rstrip('/')}/rest/v1/",
            headers={
                "apikey": key,
                "Authorization": f"Bearer {key}",
                "Accept": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    # -------- ShopStore --------

    def list(self) -> list[Shop]:
        response = self._send("list", "GET", params={"select": "*", "order": "created_at.desc"})
        try:
            rows = response.json()
        except ValueError as exc:
            raise StoreOperationFailed("Malformed response body", str(exc), operation="list") from exc
        if rows is None:
            return []
        if not isinstance(rows, list):
            raise StoreOperationFailed("Unexpected response shape", f"expected a JSON array, got {type(rows).__name__}",
                                       operation="list")
        try:
            return [Shop.from_row(row) for row in rows]
        except (TypeError, ValueError) as exc:
            raise StoreOperationFailed("Malformed row", str(exc), operation="list") from exc

    def insert(self, name: str, favorite_color: str) -> None:
        row = Shop(name=name, favorite_color=favorite_color).to_insert_row()
        self._send("insert", "POST", json=[row], headers={"Prefer": "return=minimal"})

    def delete_by_id(self, shop_id: int) -> None:
        self._send("delete", "DELETE", params={"id": f"eq.{shop_id}"})

    # -------- lifecycle --------

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "SupabaseShopStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # -------- internals --------

    def _send(self, operation: str, method: str, **kwargs: Any) -> httpx.Response:
        log.debug("%s %s (%s)", method, self.table, operation)
        try:
            response = self._client.request(method, self.table, **kwargs)
        except httpx.HTTPError as exc:
            raise StoreOperationFailed(f"Request failed: {exc.__class__.__name__}", str(exc) or None,
                                       operation=operation) from exc
        if response.is_error:
            message, details = _error_fields(response)
            raise StoreOperationFailed(message, details, operation=operation)
        return response


def _error_fields(response: httpx.Response) -> tuple[str, str | None]:
    """Pull message/details from a PostgREST error body, falling back to the HTTP status."""
    fallback = f"HTTP {response.status_code} {response.reason_phrase}".strip()
    try:
        body = response.json()
    except ValueError:
        text = response.text.strip()
        return fallback, text or None
    if not isinstance(body, dict):
        return fallback, None
    message = body.get("message") or body.get("error") or fallback
    details = body.get("details") or body.get("hint")
    return str(message), str(details) if details else None
