"""
erp_console.web.app

FastAPI app factory for the ERP console.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Create and dispose the shared backend HTTP client.
- Translate session-gate redirects into HTTP redirects.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse
from starlette.status import HTTP_303_SEE_OTHER

from erp_console import __version__
from erp_console.observability.logging import configure_logging, get_logger
from erp_console.observability.middleware import RequestContextMiddleware
from erp_console.settings import Settings
from erp_console.web.deps import LoginRedirect
from erp_console.web.routers.categories import router as categories_router
from erp_console.web.routers.health import router as health_router

log = get_logger(__name__)


def create_app(
    *, settings: Settings, transport: httpx.AsyncBaseTransport | None = None
) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.env != "dev",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, api_base_url=settings.api_base_url)
        # One pooled client for every backend call; `transport` lets tests fake the backend.
        app.state.http = httpx.AsyncClient(
            base_url=settings.api_base_url,
            timeout=settings.request_timeout_s,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )
        try:
            yield
        finally:
            await app.state.http.aclose()
            log.info("shutdown")

    app = FastAPI(
        title="ERP Suite Console",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(categories_router)

    @app.exception_handler(LoginRedirect)
    async def _login_redirect(_: Request, exc: LoginRedirect) -> RedirectResponse:
        return RedirectResponse(url=exc.location, status_code=HTTP_303_SEE_OTHER)

    return app


# --- Module Notes -----------------------------------------------------------
# 303 turns any gated request (including JSON POSTs) into a GET of the login page.
