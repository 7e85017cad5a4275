"""
erp_console.auth.models

Identity domain models.

Responsibilities:
- Define the authenticated principal record (`User`) as returned by the backend.
- Define the immutable `IdentitySnapshot` read by the session gate.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CompanyRef(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    name: str


class User(BaseModel):
    """
    Authenticated principal. The backend speaks camelCase; both spellings load.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    email: str
    first_name: str = ""
    last_name: str = ""
    role: str = ""
    is_email_verified: bool = False
    company: CompanyRef | None = Field(default=None)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True, slots=True)
class IdentitySnapshot:
    user: User | None = None
    token: str | None = None
    is_loading: bool = False

    @property
    def has_identity(self) -> bool:
        # Empty tokens count as absent: ambiguous identity fails closed.
        return self.user is not None or bool(self.token)

    @property
    def is_authenticated(self) -> bool:
        return not self.is_loading and self.has_identity


# --- Module Notes -----------------------------------------------------------
# `IdentitySnapshot` is replaced, never mutated; the store swaps in a new value
# on every change so subscribers can compare old and new cheaply.
