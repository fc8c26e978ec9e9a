"""Subscription handles for preference change listeners."""

from __future__ import annotations

from typing import Callable


class Subscription:
    def __init__(self, key: str, disconnect: Callable[[], None]):
        self.key = key
        self._disconnect = disconnect
        self._cancel_callbacks: list[Callable[["Subscription"], None]] = []
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def add_cancel_callback(self, callback: Callable[["Subscription"], None]) -> None:
        """Run callback(subscription) once the subscription is cancelled."""
        self._cancel_callbacks.append(callback)

    def cancel(self) -> None:
        if not self._active:
            return
        self._active = False
        self._disconnect()
        callbacks, self._cancel_callbacks = self._cancel_callbacks, []
        for callback in callbacks:
            callback(self)


class SubscriptionGroup:
    """Collects live subscriptions so an owner can cancel them together.

    A subscription cancelled on its own leaves the group immediately.
    """

    def __init__(self):
        self._subscriptions: list[Subscription] = []

    def __len__(self) -> int:
        return len(self._subscriptions)

    def add(self, subscription: Subscription) -> Subscription:
        if subscription.active:
            self._subscriptions.append(subscription)
            subscription.add_cancel_callback(self._discard)
        return subscription

    def cancel_all(self) -> None:
        subscriptions, self._subscriptions = self._subscriptions, []
        for subscription in subscriptions:
            subscription.cancel()

    def _discard(self, subscription: Subscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)
