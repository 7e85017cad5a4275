"""
erp_console.inventory.forms

Category draft schema and validation.

Responsibilities:
- Define the mutable `CategoryDraft` held by the form.
- Validate a draft against the declarative `CategoryFields` schema, returning
  field-scoped errors instead of raising.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from erp_console.inventory.models import Category

# Friendlier text for the schema failures a user can actually trigger.
_MESSAGES: dict[tuple[str, str], str] = {
    ("name", "string_too_short"): "Category name is required",
    ("name", "missing"): "Category name is required",
}


class CategoryFields(BaseModel):
    name: str = Field(min_length=1)
    description: str | None = None


@dataclass(slots=True)
class CategoryDraft:
    name: str = ""
    description: str = ""

    @classmethod
    def from_category(cls, category: Category | None) -> CategoryDraft:
        if category is None:
            return cls()
        return cls(name=category.name or "", description=category.description or "")

    def as_fields(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    valid: bool
    field_errors: dict[str, str] = field(default_factory=dict)


def validate_category(draft: CategoryDraft | Mapping[str, Any]) -> ValidationResult:
    data = draft.as_fields() if isinstance(draft, CategoryDraft) else dict(draft)
    try:
        CategoryFields.model_validate(data)
    except ValidationError as e:
        errors: dict[str, str] = {}
        for err in e.errors():
            name = str(err["loc"][0]) if err["loc"] else "__root__"
            # First failure per field wins.
            errors.setdefault(name, _MESSAGES.get((name, err["type"]), err["msg"]))
        return ValidationResult(valid=False, field_errors=errors)
    return ValidationResult(valid=True)


# --- Module Notes -----------------------------------------------------------
# The backend re-validates (length limits, uniqueness); the client only enforces
# a non-empty name before spending a request.
