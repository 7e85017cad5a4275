"""
erp_console.web.routers.categories

Session-gated category endpoints.

Responsibilities:
- List categories (the view refreshed after a successful save).
- Drive one `CategoryFormController` submit per request and report its outcome.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from starlette.status import HTTP_502_BAD_GATEWAY

from erp_console.api_clients.inventory_http import InventoryApiClient, RequestError
from erp_console.inventory.category_form import (
    CategoryFormController,
    FormMode,
    SubmitOutcome,
)
from erp_console.inventory.models import Category
from erp_console.notifications import Toast, ToastQueue
from erp_console.web.deps import inventory_client

router = APIRouter(prefix="/v1/inventory/categories", tags=["inventory"])


class CategoryOut(BaseModel):
    id: str
    name: str
    description: str | None = None


class DraftIn(BaseModel):
    name: str = ""
    description: str = ""


class CategoryFormRequest(BaseModel):
    category: CategoryOut | None = None
    draft: DraftIn = Field(default_factory=DraftIn)


class ToastOut(BaseModel):
    level: str
    message: str


class CategoryFormResponse(BaseModel):
    outcome: SubmitOutcome
    mode: FormMode
    open: bool
    loading: bool
    draft: DraftIn
    field_errors: dict[str, str]
    notifications: list[ToastOut]
    saved: CategoryOut | None = None
    saved_count: int = 0


def _out(category: Category) -> CategoryOut:
    return CategoryOut(id=category.id, name=category.name, description=category.description)


def _toast_out(toast: Toast) -> ToastOut:
    return ToastOut(level=toast.level, message=toast.message)


@router.get("", response_model=list[CategoryOut])
async def list_categories(
    client: InventoryApiClient = Depends(inventory_client),
) -> list[CategoryOut]:
    try:
        categories = await client.list_categories()
    except RequestError as e:
        raise HTTPException(
            status_code=HTTP_502_BAD_GATEWAY, detail=e.message or "Error fetching categories"
        ) from e
    return [_out(c) for c in categories]


@router.post("/form", response_model=CategoryFormResponse)
async def submit_category_form(
    body: CategoryFormRequest,
    client: InventoryApiClient = Depends(inventory_client),
) -> CategoryFormResponse:
    toasts = ToastQueue()
    saved_count = 0
    existing = (
        Category(id=body.category.id, name=body.category.name, description=body.category.description)
        if body.category is not None
        else None
    )

    def _count_save() -> None:
        nonlocal saved_count
        saved_count += 1

    form = CategoryFormController(
        api=client,
        notify=toasts,
        on_open_change=lambda open: form.set_open(open),
        on_success=_count_save,
        open=True,
        category=existing,
    )
    form.update(name=body.draft.name, description=body.draft.description)
    outcome = await form.submit()

    return CategoryFormResponse(
        outcome=outcome,
        mode=form.mode,
        open=form.open,
        loading=form.loading,
        draft=DraftIn(name=form.draft.name, description=form.draft.description),
        field_errors=form.field_errors,
        notifications=[_toast_out(t) for t in toasts.drain()],
        saved=_out(form.last_saved) if outcome is SubmitOutcome.saved and form.last_saved else None,
        saved_count=saved_count,
    )


# --- Module Notes -----------------------------------------------------------
# The browser owns the dialog; this endpoint replays one submit server-side so
# validation, notification text and close/keep-open decisions stay in one place.
