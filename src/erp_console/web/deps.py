"""
erp_console.web.deps

FastAPI dependency wiring for the web layer.

Responsibilities:
- Provide settings and the shared backend `httpx.AsyncClient`.
- Build a per-request `IdentityStore` from the bearer header or session cookie.
- Guard routes with the `SessionGate`, turning its login navigation into a redirect.
"""

from __future__ import annotations

import httpx
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from erp_console.api_clients.inventory_http import InventoryApiClient
from erp_console.auth.gate import SessionGate
from erp_console.auth.models import IdentitySnapshot
from erp_console.auth.store import IdentityStore
from erp_console.navigation import HistoryRouter
from erp_console.settings import Settings, get_settings

_bearer = HTTPBearer(auto_error=False)


class LoginRedirect(Exception):
    def __init__(self, location: str) -> None:
        super().__init__(location)
        self.location = location


def settings_dep(request: Request) -> Settings:
    # Bound in `create_app`; falls back to env settings outside an app.
    return getattr(request.app.state, "settings", None) or get_settings()


def http_from_app(request: Request) -> httpx.AsyncClient:
    # Created in the app lifespan (see `erp_console.web.app.create_app`).
    return request.app.state.http  # type: ignore[attr-defined]


def identity_from_request(
    request: Request,
    creds: HTTPAuthorizationCredentials | None = Depends(_bearer),
    settings: Settings = Depends(settings_dep),
) -> IdentityStore:
    token = creds.credentials if creds is not None else request.cookies.get(settings.session_cookie)
    # Server-side identity is resolved synchronously: never in the loading state.
    return IdentityStore(IdentitySnapshot(token=token or None, is_loading=False))


def require_session(
    request: Request,
    identity: IdentityStore = Depends(identity_from_request),
    settings: Settings = Depends(settings_dep),
) -> IdentityStore:
    router = HistoryRouter(current_path=request.url.path)
    gate: SessionGate[None] = SessionGate(
        store=identity, router=router, children=None, login_path=settings.login_path
    )
    gate.mount()
    gate.unmount()
    if router.navigations:
        raise LoginRedirect(router.current_path)
    return identity


def inventory_client(
    http: httpx.AsyncClient = Depends(http_from_app),
    identity: IdentityStore = Depends(require_session),
) -> InventoryApiClient:
    return InventoryApiClient(http=http, identity=identity)


# --- Module Notes -----------------------------------------------------------
# Gated routes depend on `require_session` (directly or via `inventory_client`);
# ungated routes such as health checks never build an identity store.
