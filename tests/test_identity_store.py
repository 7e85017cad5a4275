"""
tests.test_identity_store

Identity store actions, change notification and persistence.
"""

from __future__ import annotations

from erp_console.auth.models import IdentitySnapshot, User
from erp_console.auth.store import IdentityStore

BOB = User.model_validate(
    {
        "id": "u2",
        "email": "bob@example.com",
        "firstName": "Bob",
        "lastName": "Smith",
        "role": "manager",
        "isEmailVerified": True,
        "company": {"id": "c1", "name": "Acme"},
    }
)


def test_listeners_see_each_effective_change() -> None:
    store = IdentityStore()
    seen: list[IdentitySnapshot] = []
    store.subscribe(seen.append)

    store.set_loading(True)
    store.set_loading(True)
    store.login(BOB, "tok")

    assert [s.is_loading for s in seen] == [True, False]
    assert seen[-1].user == BOB
    assert seen[-1].is_authenticated


def test_unsubscribe_stops_notifications() -> None:
    store = IdentityStore()
    seen: list[IdentitySnapshot] = []
    unsubscribe = store.subscribe(seen.append)

    unsubscribe()
    store.set_token("tok")

    assert seen == []
    assert store.snapshot.token == "tok"


def test_logout_clears_identity() -> None:
    store = IdentityStore(IdentitySnapshot(user=BOB, token="tok", is_loading=True))

    store.logout()

    assert store.snapshot == IdentitySnapshot()


def test_persisted_round_trip_drops_loading_flag() -> None:
    store = IdentityStore(IdentitySnapshot(user=BOB, token="tok", is_loading=True))

    data = store.persisted()
    restored = IdentityStore.from_persisted(data)

    assert data["user"]["firstName"] == "Bob"
    assert restored.snapshot == IdentitySnapshot(user=BOB, token="tok")
    assert BOB.full_name == "Bob Smith"


def test_from_persisted_tolerates_empty_storage() -> None:
    assert IdentityStore.from_persisted(None).snapshot == IdentitySnapshot()
    assert IdentityStore.from_persisted({"token": ""}).snapshot.token is None


def test_set_user_notifies_and_authenticates() -> None:
    store = IdentityStore()
    seen: list[IdentitySnapshot] = []
    store.subscribe(seen.append)

    store.set_user(BOB)

    assert seen == [IdentitySnapshot(user=BOB)]
    assert store.snapshot.is_authenticated


def test_listener_writing_during_notification_leaves_others_current() -> None:
    store = IdentityStore()
    late: list[IdentitySnapshot] = []

    def logout_on_login(snapshot: IdentitySnapshot) -> None:
        if snapshot.token == "tok":
            store.logout()

    store.subscribe(logout_on_login)
    store.subscribe(late.append)

    store.login(BOB, "tok")

    assert store.snapshot == IdentitySnapshot()
    assert late[-1] == store.snapshot
    assert all(s.token is None for s in late)


def test_corrupt_persisted_user_fails_closed() -> None:
    store = IdentityStore.from_persisted({"user": {"firstName": "x"}, "token": "tok"})

    assert store.snapshot == IdentitySnapshot()
    assert not store.snapshot.is_authenticated
