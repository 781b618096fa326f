"""Pure Python signals for view models.

Provides ``Signal`` for observer-pattern callbacks and ``ObservableProperty``
for the values a host binds to.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

_logger = logging.getLogger(__name__)


class Signal:
    """Ordered list of callbacks invoked by :meth:`emit`.

    Handlers run in connection order.  A handler connected twice runs twice;
    :meth:`disconnect` removes the first registration and ignores handlers
    that were never connected.  Exceptions raised by one handler are logged
    and do not prevent the remaining handlers from running.
    """

    def __init__(self) -> None:
        self._handlers: list[Callable] = []

    def connect(self, handler: Callable) -> None:
        self._handlers.append(handler)

    def disconnect(self, handler: Callable) -> None:
        try:
            self._handlers.remove(handler)
        except ValueError:
            pass

    def emit(self, *args: Any, **kwargs: Any) -> None:
        # Iterate over a copy so handlers may (dis)connect while we emit.
        for handler in list(self._handlers):
            try:
                handler(*args, **kwargs)
            except Exception as exc:
                _logger.error("Signal handler %r failed: %s", handler, exc)

    @property
    def handler_count(self) -> int:
        return len(self._handlers)


class ObservableProperty:
    """Observable value a host can read and subscribe to.

    Emits ``changed(new_value, old_value)`` whenever the value changes.  With
    ``identity=True`` any assignment of a different object notifies, even if
    it compares equal to the previous one.
    """

    def __init__(self, initial_value: Any = None, *, identity: bool = False) -> None:
        self._value = initial_value
        self._identity = identity
        self.changed = Signal()

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, new_value: Any) -> None:
        if self._identity:
            unchanged = new_value is self._value
        else:
            unchanged = new_value == self._value
        if unchanged:
            return
        old_value = self._value
        self._value = new_value
        self.changed.emit(new_value, old_value)
