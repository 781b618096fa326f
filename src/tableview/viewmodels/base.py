"""BaseViewModel: tracks disposable subscriptions for a view model.

Concrete view models register every subscription they open through
``track()`` so that ``dispose()`` can release them on teardown.
"""

from __future__ import annotations

from typing import Protocol, TypeVar


class Disposable(Protocol):
    def dispose(self) -> None: ...


D = TypeVar("D", bound=Disposable)


class BaseViewModel:
    """ViewModel base class with subscription lifecycle management."""

    def __init__(self) -> None:
        self._subscriptions: list[Disposable] = []

    def track(self, subscription: D) -> D:
        """Remember *subscription* so :meth:`dispose` releases it."""
        self._subscriptions.append(subscription)
        return subscription

    def release(self, subscription: Disposable) -> None:
        """Dispose *subscription* now and stop tracking it."""
        subscription.dispose()
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)

    def dispose(self) -> None:
        """Release all tracked subscriptions."""
        for sub in self._subscriptions:
            sub.dispose()
        self._subscriptions.clear()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.dispose()
