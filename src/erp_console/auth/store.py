"""
erp_console.auth.store

Reactive client identity store.

Responsibilities:
- Hold the current `IdentitySnapshot` and notify subscribers synchronously on change.
- Provide the login/logout/loading actions used by auth flows and the API client.
- Persist `{user, token}` so a session survives a reload.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from typing import Any

from pydantic import ValidationError

from erp_console.auth.models import IdentitySnapshot, User
from erp_console.observability.logging import get_logger

log = get_logger(__name__)

Listener = Callable[[IdentitySnapshot], None]


class IdentityStore:
    """
    Single mutable cell of identity state.

    Listeners run in subscription order, immediately after each effective
    change. Writes that leave the snapshot unchanged notify nobody.
    """

    def __init__(self, initial: IdentitySnapshot | None = None) -> None:
        self._snapshot = initial or IdentitySnapshot()
        self._listeners: list[Listener] = []

    @property
    def snapshot(self) -> IdentitySnapshot:
        return self._snapshot

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set(self, **changes: Any) -> None:
        nxt = replace(self._snapshot, **changes)
        if nxt == self._snapshot:
            return
        self._snapshot = nxt
        # Copy: a listener may unsubscribe itself while being notified.
        for listener in list(self._listeners):
            if self._snapshot is not nxt:
                # A listener wrote to the store; that nested write already
                # notified everyone with the newer snapshot.
                break
            listener(nxt)

    # Actions

    def set_user(self, user: User) -> None:
        self._set(user=user)

    def set_token(self, token: str) -> None:
        self._set(token=token)

    def set_loading(self, is_loading: bool) -> None:
        self._set(is_loading=is_loading)

    def login(self, user: User, token: str) -> None:
        self._set(user=user, token=token, is_loading=False)
        log.info("identity_login", user_id=user.id)

    def logout(self) -> None:
        self._set(user=None, token=None, is_loading=False)
        log.info("identity_logout")

    # Persistence

    def persisted(self) -> dict[str, Any]:
        # Only durable fields; `is_loading` is always re-derived on load.
        user = self._snapshot.user
        return {
            "user": user.model_dump(by_alias=True) if user is not None else None,
            "token": self._snapshot.token,
        }

    @classmethod
    def from_persisted(cls, data: dict[str, Any] | None) -> IdentityStore:
        data = data or {}
        raw_user = data.get("user")
        token = data.get("token") or None
        try:
            user = User.model_validate(raw_user) if raw_user else None
        except ValidationError as e:
            # Corrupt storage fails closed: keep neither the user nor the token.
            log.warning("identity_restore_failed", error=str(e))
            return cls()
        return cls(IdentitySnapshot(user=user, token=token))


# --- Module Notes -----------------------------------------------------------
# Consumers never write the snapshot directly; the gate only subscribes, and the
# API client calls `logout()` when the backend rejects the held credential.
