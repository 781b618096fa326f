"""Structural change notifications for record collections.

``ObservableList`` is a list-like source that emits ``changed`` whenever
elements are inserted, removed, replaced or reordered.  Edits made inside a
record are invisible to it.  :func:`observe_collection` is the default
observer facility handed to :class:`TableViewModel`.
"""

from __future__ import annotations

import logging
from collections.abc import MutableSequence
from typing import Any, Callable, Iterable, Optional

from .signal import Signal

LOGGER = logging.getLogger(__name__)


class ObservableList(MutableSequence):
    """List wrapper announcing structural mutations through ``changed``."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(items)
        self.changed = Signal()

    # -- MutableSequence API -----------------------------------------------

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index, value) -> None:
        self._items[index] = value
        self.changed.emit()

    def __delitem__(self, index) -> None:
        del self._items[index]
        self.changed.emit()

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, index: int, value: Any) -> None:
        self._items.insert(index, value)
        self.changed.emit()

    # -- bulk operations (one notification each) ---------------------------

    def extend(self, values: Iterable[Any]) -> None:
        values = list(values)
        if not values:
            return
        self._items.extend(values)
        self.changed.emit()

    def clear(self) -> None:
        if not self._items:
            return
        self._items.clear()
        self.changed.emit()

    def reverse(self) -> None:
        self._items.reverse()
        self.changed.emit()

    def sort(self, *, key: Optional[Callable] = None, reverse: bool = False) -> None:
        self._items.sort(key=key, reverse=reverse)
        self.changed.emit()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ObservableList):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ObservableList({self._items!r})"


class CollectionSubscription:
    """Handle tying callbacks to one collection's ``changed`` signal.

    Callbacks registered through :meth:`on_change` receive no arguments.
    :meth:`dispose` disconnects everything; it is safe to call repeatedly.
    """

    def __init__(self, signal: Optional[Signal]) -> None:
        self._signal = signal
        self._callbacks: list[Callable[[], None]] = []
        self.active = True
        if signal is not None:
            signal.connect(self._dispatch)

    def on_change(self, callback: Callable[[], None]) -> "CollectionSubscription":
        if self.active:
            self._callbacks.append(callback)
        return self

    def dispose(self) -> None:
        if not self.active:
            return
        self.active = False
        if self._signal is not None:
            self._signal.disconnect(self._dispatch)
        self._callbacks.clear()

    def _dispatch(self, *_args: Any) -> None:
        for callback in list(self._callbacks):
            callback()


def observe_collection(collection: Any) -> CollectionSubscription:
    """Subscribe to structural changes of *collection*.

    Any object exposing a ``changed`` :class:`Signal` is observed; other
    sequences cannot report mutations and get an inert subscription.
    """

    signal = getattr(collection, "changed", None)
    if not isinstance(signal, Signal):
        LOGGER.debug(
            "%s does not publish change notifications; in-place edits need refresh()",
            type(collection).__name__,
        )
        signal = None
    return CollectionSubscription(signal)


__all__ = ["CollectionSubscription", "ObservableList", "observe_collection"]
