"""Identity Stream: tests for caller-owned sign-in state and change notifications.

Tests cover:
    - Subscribers see sign-in and sign-out
    - No notification when identity does not change
    - unsubscribe is idempotent and immediate
    - Leaving the context manager detaches everyone
"""

from lendshelf.core.domain_types import UserId
from lendshelf.core.identity import Identity, IdentityStream

ALICE = Identity(id=UserId("alice"), email="a@x.com")
BOB = Identity(id=UserId("bob"))


def test_starts_with_initial_identity():
    assert IdentityStream().current() is None
    assert IdentityStream(ALICE).current() == ALICE


def test_subscribers_see_sign_in_and_sign_out():
    stream = IdentityStream()
    seen = []
    stream.subscribe(seen.append)

    stream.sign_in(ALICE)
    stream.sign_out()

    assert seen == [ALICE, None]
    assert stream.current() is None


def test_no_notification_without_change():
    stream = IdentityStream(ALICE)
    seen = []
    stream.subscribe(seen.append)

    stream.sign_in(ALICE)

    assert seen == []


def test_switching_users_notifies():
    stream = IdentityStream(ALICE)
    seen = []
    stream.subscribe(seen.append)

    stream.sign_in(BOB)

    assert seen == [BOB]


def test_unsubscribe_stops_notifications():
    stream = IdentityStream()
    seen = []
    subscription = stream.subscribe(seen.append)

    subscription.unsubscribe()
    subscription.unsubscribe()
    stream.sign_in(ALICE)

    assert seen == []
    assert stream.subscriber_count == 0


def test_callback_may_unsubscribe_itself():
    stream = IdentityStream()
    seen = []

    def once(identity):
        seen.append(identity)
        subscription.unsubscribe()

    subscription = stream.subscribe(once)
    stream.sign_in(ALICE)
    stream.sign_in(BOB)

    assert seen == [ALICE]


def test_context_manager_detaches_all_subscribers():
    seen = []
    with IdentityStream() as stream:
        stream.subscribe(seen.append)
        stream.subscribe(seen.append)
        assert stream.subscriber_count == 2

    assert stream.subscriber_count == 0
    stream.sign_in(ALICE)
    assert seen == []
