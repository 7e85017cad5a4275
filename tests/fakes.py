"""
tests.fakes

Shared test doubles.

Responsibilities:
- A fake category API that records calls and can block or fail on demand.
- A recording router that counts every navigate call.
"""

from __future__ import annotations

import asyncio
from typing import Any

from erp_console.api_clients.inventory_http import RequestError
from erp_console.inventory.models import Category


class FakeCategoryApi:
    def __init__(
        self, *, error: RequestError | None = None, release: asyncio.Event | None = None
    ) -> None:
        self.error = error
        self.release = release
        self.created: list[dict[str, Any]] = []
        self.updated: list[tuple[str, dict[str, Any]]] = []

    async def _settle(self) -> None:
        if self.release is not None:
            await self.release.wait()
        if self.error is not None:
            raise self.error

    async def create_category(self, fields: dict[str, Any]) -> Category:
        self.created.append(dict(fields))
        await self._settle()
        return Category(id="new-1", name=fields["name"], description=fields.get("description"))

    async def update_category(self, category_id: str, fields: dict[str, Any]) -> Category:
        self.updated.append((category_id, dict(fields)))
        await self._settle()
        return Category(id=category_id, name=fields["name"], description=fields.get("description"))

    @property
    def calls(self) -> int:
        return len(self.created) + len(self.updated)


class RecordingRouter:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def navigate(self, path: str) -> None:
        self.calls.append(path)
