"""
tests.test_session_gate

Session gate rendering and redirect behavior.
"""

from __future__ import annotations

import pytest

from erp_console.auth.gate import LOADING, GateState, SessionGate, evaluate
from erp_console.auth.models import IdentitySnapshot, User
from erp_console.auth.store import IdentityStore
from erp_console.navigation import HistoryRouter
from tests.fakes import RecordingRouter

ALICE = User(id="u1", email="alice@example.com", firstName="Alice", lastName="Doe", role="admin")


def _gate(snapshot: IdentitySnapshot) -> tuple[IdentityStore, RecordingRouter, SessionGate[str]]:
    store = IdentityStore(snapshot)
    router = RecordingRouter()
    return store, router, SessionGate(store=store, router=router, children="dashboard")


def test_unauthenticated_renders_nothing_and_redirects_once() -> None:
    store, router, gate = _gate(IdentitySnapshot())

    assert gate.mount() is None
    assert gate.state is GateState.unauthenticated
    assert router.calls == ["/auth/login"]

    # Same snapshot again: the effect's dependencies did not change.
    store.set_loading(False)
    gate.mount()
    assert router.calls == ["/auth/login"]


@pytest.mark.parametrize(
    "snapshot",
    [
        IdentitySnapshot(user=ALICE),
        IdentitySnapshot(token="t0k"),
        IdentitySnapshot(user=ALICE, token="t0k"),
    ],
)
def test_any_identity_passes_children_through(snapshot: IdentitySnapshot) -> None:
    _, router, gate = _gate(snapshot)

    assert gate.mount() == "dashboard"
    assert gate.state is GateState.authenticated
    assert router.calls == []


@pytest.mark.parametrize(
    "snapshot",
    [
        IdentitySnapshot(is_loading=True),
        IdentitySnapshot(user=ALICE, is_loading=True),
        IdentitySnapshot(user=ALICE, token="t0k", is_loading=True),
    ],
)
def test_loading_shows_placeholder_without_navigation(snapshot: IdentitySnapshot) -> None:
    _, router, gate = _gate(snapshot)

    assert gate.mount() is LOADING
    assert gate.state is GateState.resolving
    assert router.calls == []


def test_redirect_waits_for_resolution() -> None:
    store, router, gate = _gate(IdentitySnapshot(is_loading=True))
    gate.mount()
    assert router.calls == []

    store.set_loading(False)

    assert gate.rendered is None
    assert router.calls == ["/auth/login"]


def test_logout_after_authenticated_render_redirects() -> None:
    store, router, gate = _gate(IdentitySnapshot(user=ALICE, token="t0k"))
    assert gate.mount() == "dashboard"

    store.logout()

    assert gate.rendered is None
    assert router.calls == ["/auth/login"]

    store.login(ALICE, "t1k")
    assert gate.rendered == "dashboard"
    store.logout()
    assert router.calls == ["/auth/login", "/auth/login"]


def test_empty_token_fails_closed() -> None:
    assert evaluate(IdentitySnapshot(token="")) is GateState.unauthenticated


def test_unmounted_gate_ignores_changes() -> None:
    store, router, gate = _gate(IdentitySnapshot(user=ALICE))
    gate.mount()
    gate.unmount()

    store.logout()

    assert router.calls == []
    assert not gate.mounted


def test_history_router_ignores_navigation_to_current_path() -> None:
    router = HistoryRouter(current_path="/dashboard")
    router.navigate("/auth/login")
    router.navigate("/auth/login")

    assert router.current_path == "/auth/login"
    assert router.navigations == ["/auth/login"]


def test_empty_token_write_does_not_redirect_again() -> None:
    store, router, gate = _gate(IdentitySnapshot())
    gate.mount()

    store.set_token("")

    assert gate.rendered is None
    assert router.calls == ["/auth/login"]
