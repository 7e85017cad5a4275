"""
erp_console.api_clients.inventory_http

HTTP client boundary for the inventory endpoints of the REST backend.

Responsibilities:
- Attach the held bearer token to every request.
- Unwrap the backend's `{success, data}` envelope into typed models.
- Convert every non-2xx response or transport failure into `RequestError`.
- Log the identity store out when the backend rejects the credential itself.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from erp_console.auth.store import IdentityStore
from erp_console.inventory.models import Category
from erp_console.observability.logging import get_logger

log = get_logger(__name__)

_AUTH_FAILURE_HINTS = ("token", "authentication", "expired")


class RequestError(Exception):
    """
    A create/update/list/delete call failed. `message` is the server's
    human-readable message when one was supplied.
    """

    def __init__(self, message: str | None = None, *, status_code: int | None = None) -> None:
        super().__init__(message or "request failed")
        self.message = message
        self.status_code = status_code


def _error_message(r: httpx.Response) -> str | None:
    try:
        body = r.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"] or None
    return None


def _is_auth_failure(status_code: int, message: str | None) -> bool:
    # 401s from validation-ish failures must not end the session.
    if status_code != 401 or not message:
        return False
    if message == "Access token required":
        return True
    return any(hint in message for hint in _AUTH_FAILURE_HINTS)


def _extract_data(r: httpx.Response) -> Any:
    if not r.content:
        return None
    body = r.json()
    if isinstance(body, dict) and body.get("success") and "data" in body:
        return body["data"]
    return body


class InventoryApiClient:
    """
    Talks to `/inventory/categories` relative to the shared client's base URL.
    """

    def __init__(self, *, http: httpx.AsyncClient, identity: IdentityStore | None = None) -> None:
        self._http = http
        self._identity = identity

    def _authz(self) -> dict[str, str]:
        token = self._identity.snapshot.token if self._identity is not None else None
        return {"Authorization": f"Bearer {token}"} if token else {}

    async def _request(self, method: str, url: str, *, json: Any = None) -> Any:
        try:
            r = await self._http.request(method, url, headers=self._authz(), json=json)
        except httpx.HTTPError as e:
            log.warning("api_transport_error", method=method, url=url, error=str(e))
            raise RequestError() from e

        if r.is_error:
            message = _error_message(r)
            log.warning(
                "api_error", method=method, url=url, status=r.status_code, message=message
            )
            if self._identity is not None and _is_auth_failure(r.status_code, message):
                self._identity.logout()
            raise RequestError(message, status_code=r.status_code)

        try:
            return _extract_data(r)
        except ValueError as e:
            log.warning("api_unexpected_payload", method=method, url=url, error=str(e))
            raise RequestError(status_code=r.status_code) from e

    async def list_categories(self) -> list[Category]:
        data = await self._request("GET", "/inventory/categories")
        if isinstance(data, dict) and isinstance(data.get("categories"), list):
            data = data["categories"]
        if not isinstance(data, list):
            return []
        return [_parse_category(item) for item in data]

    async def create_category(self, fields: dict[str, Any]) -> Category:
        data = await self._request("POST", "/inventory/categories", json=fields)
        return _parse_category(data)

    async def update_category(self, category_id: str, fields: dict[str, Any]) -> Category:
        data = await self._request("PUT", _category_path(category_id), json=fields)
        return _parse_category(data)

    async def delete_category(self, category_id: str) -> None:
        await self._request("DELETE", _category_path(category_id))


def _category_path(category_id: str) -> str:
    # Ids are opaque; `/` or `?` must not reshape the route.
    return f"/inventory/categories/{quote(category_id, safe='')}"


def _parse_category(data: Any) -> Category:
    if isinstance(data, dict) and isinstance(data.get("category"), dict):
        data = data["category"]
    try:
        return Category.model_validate(data)
    except ValidationError as e:
        log.warning("api_unexpected_payload", error=str(e))
        raise RequestError() from e


# --- Module Notes -----------------------------------------------------------
# Timeouts and the base URL live on the shared `httpx.AsyncClient` created by the
# web composition root; this client never builds its own transport.
