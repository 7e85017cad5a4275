"""
erp_console.inventory.models

Inventory entity models as returned by the backend REST API.

Responsibilities:
- Define `Category` and accept both `id` and Mongo-style `_id` keys.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Category(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(validation_alias=AliasChoices("id", "_id"))
    name: str
    description: str | None = None
    parent_id: str | None = Field(default=None, validation_alias=AliasChoices("parent_id", "parentId"))
    created_at: datetime | None = Field(
        default=None, validation_alias=AliasChoices("created_at", "createdAt")
    )
    updated_at: datetime | None = Field(
        default=None, validation_alias=AliasChoices("updated_at", "updatedAt")
    )


# --- Module Notes -----------------------------------------------------------
# Unknown backend fields (companyId, isActive, ...) are ignored on load.
