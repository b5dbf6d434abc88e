"""Identity: the signed-in user as an explicit value, plus a caller-owned change stream.

Invariants:
    - Identity is immutable; operations receive `Identity | None` explicitly
    - IdentityStream notifies subscribers only when the identity actually changes
    - Subscription.unsubscribe() is idempotent; after it returns, the callback never fires
    - Closing the stream (or leaving its `with` block) detaches every subscriber

Design Decisions:
    - No ambient "current session" global: the stream is owned by whoever renders
      (a page, a CLI, a test) and torn down by it
    - Callbacks run synchronously in subscription order; a snapshot of subscribers is
      taken before dispatch so callbacks may unsubscribe themselves
"""

import logging
from dataclasses import dataclass
from typing import Callable

from lendshelf.core.domain_types import UserId

logger = logging.getLogger(__name__)

IdentityCallback = Callable[["Identity | None"], None]


@dataclass(frozen=True)
class Identity:
    """An authenticated user, as reported by the identity provider."""
    id: UserId
    email: str | None = None


class Subscription:
    """Handle returned by IdentityStream.subscribe."""

    def __init__(self, stream: "IdentityStream", callback: IdentityCallback):
        self._stream = stream
        self._callback = callback
        self.active = True

    def unsubscribe(self) -> None:
        if not self.active:
            return
        self.active = False
        self._stream._detach(self)


class IdentityStream:
    """Holds the current identity and fans out changes to subscribers."""

    def __init__(self, initial: Identity | None = None):
        self._current = initial
        self._subscriptions: list[Subscription] = []

    def current(self) -> Identity | None:
        return self._current

    def subscribe(self, callback: IdentityCallback) -> Subscription:
        subscription = Subscription(self, callback)
        self._subscriptions.append(subscription)
        return subscription

    def sign_in(self, identity: Identity) -> None:
        self._set(identity)

    def sign_out(self) -> None:
        self._set(None)

    def close(self) -> None:
        for subscription in list(self._subscriptions):
            subscription.unsubscribe()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def _set(self, identity: Identity | None) -> None:
        if identity == self._current:
            return
        self._current = identity
        for subscription in list(self._subscriptions):
            if subscription.active:
                subscription._callback(identity)

    def _detach(self, subscription: Subscription) -> None:
        try:
            self._subscriptions.remove(subscription)
        except ValueError:
            logger.debug("Subscription already detached")

    def __enter__(self) -> "IdentityStream":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
