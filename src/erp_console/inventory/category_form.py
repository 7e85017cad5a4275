"""
erp_console.inventory.category_form

Create/edit controller for the category dialog.

Responsibilities:
- Hold the draft, field errors and `loading` flag of one dialog instance.
- Validate, then dispatch exactly one create-or-update request per accepted submit.
- Report each attempt through one notification and settle `loading` in all outcomes.
- Treat dialog visibility as parent-owned: request changes via `on_open_change`.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any, Protocol

from erp_console.api_clients.inventory_http import RequestError
from erp_console.inventory.forms import CategoryDraft, validate_category
from erp_console.inventory.models import Category
from erp_console.notifications import NotificationSink
from erp_console.observability.logging import get_logger

log = get_logger(__name__)

FALLBACK_ERROR = "Failed to save category"


class CategoryApi(Protocol):
    async def create_category(self, fields: dict[str, Any]) -> Category: ...

    async def update_category(self, category_id: str, fields: dict[str, Any]) -> Category: ...


class FormMode(str, Enum):
    create = "create"
    edit = "edit"


class FormPhase(str, Enum):
    idle = "IDLE"
    submitting = "SUBMITTING"


class SubmitOutcome(str, Enum):
    saved = "SAVED"
    failed = "FAILED"
    invalid = "INVALID"
    busy = "BUSY"


class CategoryFormController:
    """
    Mirrors a controlled dialog component.

    Props: `open`, `on_open_change`, `on_success`, `category`. The parent applies
    visibility changes with `set_open`; the controller never flips `open` itself.
    """

    def __init__(
        self,
        *,
        api: CategoryApi,
        notify: NotificationSink,
        on_open_change: Callable[[bool], None],
        on_success: Callable[[], None],
        open: bool = False,
        category: Category | None = None,
    ) -> None:
        self._api = api
        self._notify = notify
        self._on_open_change = on_open_change
        self._on_success = on_success
        self._category = category
        self.open = open
        self.draft = CategoryDraft.from_category(category)
        self.field_errors: dict[str, str] = {}
        self.loading = False
        self.mounted = True
        self.last_saved: Category | None = None

    # Props

    @property
    def category(self) -> Category | None:
        return self._category

    def set_category(self, category: Category | None) -> None:
        # The draft is re-derived on the next open, not mid-edit.
        self._category = category

    def set_open(self, open: bool) -> None:
        if open and not self.open:
            self._reset_draft(self._category)
        self.open = open

    # View

    @property
    def mode(self) -> FormMode:
        return FormMode.edit if self._category is not None else FormMode.create

    @property
    def phase(self) -> FormPhase:
        return FormPhase.submitting if self.loading else FormPhase.idle

    @property
    def title(self) -> str:
        return "Edit Category" if self.mode is FormMode.edit else "Add New Category"

    @property
    def subtitle(self) -> str:
        if self.mode is FormMode.edit:
            return "Update the category information below."
        return "Create a new product category."

    @property
    def submit_label(self) -> str:
        return "Update Category" if self.mode is FormMode.edit else "Create Category"

    @property
    def submit_disabled(self) -> bool:
        return self.loading

    @property
    def cancel_disabled(self) -> bool:
        return self.loading

    # Input

    def update(self, **fields: str) -> None:
        for name, value in fields.items():
            if name not in ("name", "description"):
                raise TypeError(f"unknown category field: {name}")
            setattr(self.draft, name, value)
            self.field_errors.pop(name, None)

    def cancel(self) -> bool:
        if self.loading:
            return False
        self._on_open_change(False)
        self._reset_draft(self._category)
        return True

    def unmount(self) -> None:
        self.mounted = False

    # Submit

    async def submit(self) -> SubmitOutcome:
        if self.loading:
            log.info("category_form_submit_ignored", reason="in_flight")
            return SubmitOutcome.busy

        result = validate_category(self.draft)
        if not result.valid:
            self.field_errors = dict(result.field_errors)
            return SubmitOutcome.invalid
        self.field_errors = {}

        self.loading = True
        category, mode = self._category, self.mode
        fields = self.draft.as_fields()
        try:
            if category is not None:
                saved = await self._api.update_category(category.id, fields)
            else:
                saved = await self._api.create_category(fields)
        except RequestError as e:
            log.warning("category_form_failed", mode=mode.value, message=e.message)
            self._notify.error(e.message or FALLBACK_ERROR)
            return SubmitOutcome.failed
        else:
            log.info("category_form_saved", mode=mode.value, category_id=saved.id)
            self._notify.success(
                "Category updated successfully"
                if mode is FormMode.edit
                else "Category created successfully"
            )
            self.last_saved = saved
            self._on_success()
            if self.mounted:
                self._on_open_change(False)
                self.draft = CategoryDraft()
            return SubmitOutcome.saved
        finally:
            self.loading = False

    def _reset_draft(self, category: Category | None) -> None:
        self.draft = CategoryDraft.from_category(category)
        self.field_errors = {}


# --- Module Notes -----------------------------------------------------------
# A submit that resolves after `unmount()` still notifies and still calls
# `on_success` (the caller's listing is alive); dialog and draft updates are skipped.
