"""
erp_console.auth.gate

Session gate for protected views.

Responsibilities:
- Decide, from the current identity snapshot, whether a protected subtree renders,
  a loading placeholder shows, or the viewer is sent to the login route.
- Issue the login redirect once per transition into the unauthenticated state.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from erp_console.auth.models import IdentitySnapshot, User
from erp_console.auth.store import IdentityStore
from erp_console.navigation import LOGIN_PATH, Router
from erp_console.observability.logging import get_logger

log = get_logger(__name__)

T = TypeVar("T")


class GateState(str, Enum):
    resolving = "RESOLVING"
    authenticated = "AUTHENTICATED"
    unauthenticated = "UNAUTHENTICATED"


@dataclass(frozen=True, slots=True)
class LoadingPlaceholder:
    message: str = "Loading..."


LOADING = LoadingPlaceholder()


def evaluate(snapshot: IdentitySnapshot) -> GateState:
    if snapshot.is_loading:
        return GateState.resolving
    if snapshot.has_identity:
        return GateState.authenticated
    return GateState.unauthenticated


class SessionGate(Generic[T]):
    """
    Wraps a protected subtree (`children`).

    `render()` returns the children, the loading placeholder, or `None`.
    The redirect runs as an effect keyed on `(user, token, is_loading)`: it only
    re-runs when one of those changed since the last evaluation.
    """

    def __init__(
        self,
        *,
        store: IdentityStore,
        router: Router,
        children: T,
        placeholder: Any = LOADING,
        login_path: str = LOGIN_PATH,
    ) -> None:
        self._store = store
        self._router = router
        self._children = children
        self._placeholder = placeholder
        self._login_path = login_path
        self._unsubscribe: Callable[[], None] | None = None
        self._deps: tuple[User | None, str | None, bool] | None = None
        self.rendered: T | Any | None = None

    @property
    def state(self) -> GateState:
        return evaluate(self._store.snapshot)

    @property
    def mounted(self) -> bool:
        return self._unsubscribe is not None

    def render(self) -> T | Any | None:
        state = self.state
        if state is GateState.resolving:
            return self._placeholder
        if state is GateState.unauthenticated:
            return None
        return self._children

    def mount(self) -> T | Any | None:
        if self._unsubscribe is None:
            self._unsubscribe = self._store.subscribe(self._on_change)
        self._on_change(self._store.snapshot)
        return self.rendered

    def unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._deps = None

    def _on_change(self, snapshot: IdentitySnapshot) -> None:
        self.rendered = self.render()
        self._run_redirect_effect(snapshot)

    def _run_redirect_effect(self, snapshot: IdentitySnapshot) -> None:
        # An empty token is the same absence as `None`.
        deps = (snapshot.user, snapshot.token or None, snapshot.is_loading)
        if deps == self._deps:
            return
        self._deps = deps
        if evaluate(snapshot) is GateState.unauthenticated:
            log.info("session_gate_redirect", to=self._login_path)
            self._router.navigate(self._login_path)


# --- Module Notes -----------------------------------------------------------
# The redirect is never issued while `is_loading` is true, so it is always
# ordered after identity resolution settles.
