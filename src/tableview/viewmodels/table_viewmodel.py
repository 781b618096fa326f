"""TableViewModel: keeps a table's display rows in step with its inputs.

The view model owns one :class:`ViewState` and decides when the pipeline
re-runs.  Every input goes through a setter; outputs are published through
observable properties so a host can bind to them:

* ``display_data`` - rows of the current page (notifies on every recompute)
* ``total_items`` - number of rows surviving the filter
* ``current_page`` - written by the host and by filter-driven resets

Nothing is computed until :meth:`attach` is called, and :meth:`detach`
suspends recomputes and releases the source subscription.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional, Sequence

from ..config import DEFAULT_PAGE_SIZE, FIRST_PAGE, PAGINATION_DISABLED
from ..core.pipeline import recompute
from ..core.reveal import locate
from ..domain.models import Record, SortDirection, ViewState, as_sort_key
from ..errors import InvalidPageSizeError
from ..settings.schema import merge_with_defaults
from .base import BaseViewModel
from .collection import observe_collection
from .signal import ObservableProperty, Signal

Observer = Callable[[Any], Any]


def _validate_page_size(page_size: Any) -> int:
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
        raise InvalidPageSizeError(f"Page size must be a positive integer, got {page_size!r}")
    return page_size


def _normalise_filter_keys(keys: Any) -> list[str]:
    # A bare field name is one key, not a sequence of characters.
    if isinstance(keys, str):
        return [keys]
    return list(keys or [])


class TableApi:
    """Handle a host can pass to other widgets to drive this table."""

    def __init__(self, viewmodel: "TableViewModel") -> None:
        self._viewmodel = viewmodel

    def reveal_item(self, item: Any) -> bool:
        return self._viewmodel.reveal_item(item)


class TableViewModel(BaseViewModel):
    """Filter, sort and paginate a source collection for display."""

    def __init__(
        self,
        source: Optional[Sequence[Record]] = None,
        *,
        filter_text: Optional[str] = None,
        filter_keys: Optional[Iterable[str]] = None,
        sort_key: Any = None,
        sort_direction: Any = SortDirection.NONE,
        current_page: Optional[int] = PAGINATION_DISABLED,
        page_size: int = DEFAULT_PAGE_SIZE,
        observer: Observer = observe_collection,
    ) -> None:
        super().__init__()
        self._logger = logging.getLogger(__name__)
        self._observer = observer
        self._source_subscription = None
        self._attached = False
        self._torn_down = False

        self.state = ViewState(
            filter_text=filter_text,
            filter_keys=_normalise_filter_keys(filter_keys),
            sort_key=as_sort_key(sort_key),
            sort_direction=SortDirection.coerce(sort_direction),
            current_page=current_page,
            page_size=_validate_page_size(page_size),
        )

        # Observable outputs
        self.display_data = ObservableProperty([], identity=True)
        self.total_items = ObservableProperty(None)
        self.current_page = ObservableProperty(current_page)

        # Signals
        self.sort_changed = Signal()

        self.api = TableApi(self)

        if source is not None:
            self.set_source(source)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[dict[str, Any]] = None,
        *,
        source: Optional[Sequence[Record]] = None,
        observer: Observer = observe_collection,
    ) -> "TableViewModel":
        """Build a view model from a (partial) view settings mapping."""

        merged = merge_with_defaults(settings)
        sort = merged["sort"]
        return cls(
            source,
            filter_text=merged.get("filter_text"),
            filter_keys=merged["filter_keys"],
            sort_key=sort.get("key"),
            sort_direction=sort.get("direction", SortDirection.NONE),
            current_page=merged["current_page"],
            page_size=merged["page_size"],
            observer=observer,
        )

    # -- read access -------------------------------------------------------

    @property
    def is_attached(self) -> bool:
        return self._attached

    @property
    def source(self) -> Optional[Sequence[Record]]:
        return self.state.source

    @property
    def sort_key(self):
        return self.state.sort_key

    @property
    def sort_direction(self) -> SortDirection:
        return self.state.sort_direction

    # -- lifecycle ---------------------------------------------------------

    def attach(self) -> None:
        """Mark the view active and compute the first display rows."""

        self._attached = True
        self._torn_down = False
        if self.state.source is not None and self._source_subscription is None:
            self._subscribe(self.state.source)
        self._apply()

    def detach(self) -> None:
        """Stop recomputing and release the source subscription."""

        self._release_source_subscription()
        self._attached = False
        self._torn_down = True

    def dispose(self) -> None:
        self.detach()
        super().dispose()

    # -- inputs ------------------------------------------------------------

    def set_source(self, source: Optional[Sequence[Record]]) -> None:
        """Replace the source collection and recompute."""

        if source is self.state.source:
            return
        self._release_source_subscription()
        self.state.source = source
        if source is not None and not self._torn_down:
            self._subscribe(source)
        self._apply()

    def set_filter_text(self, text: Optional[str]) -> None:
        if text == self.state.filter_text:
            return
        self.state.filter_text = text
        self._on_filter_changed()

    def set_filter_keys(self, keys: Optional[Iterable[str] | str]) -> None:
        keys = _normalise_filter_keys(keys)
        if keys == self.state.filter_keys:
            return
        self.state.filter_keys = keys
        self._on_filter_changed()

    def set_current_page(self, page: Optional[int]) -> None:
        if page == self.state.current_page:
            return
        self._assign_page(page)
        self._apply()

    def set_page_size(self, page_size: int) -> None:
        page_size = _validate_page_size(page_size)
        if page_size == self.state.page_size:
            return
        self.state.page_size = page_size
        self._apply()

    def sort(self, key: Any, direction: Any) -> None:
        """Sort by *key* (field name or ``fn(record, direction)``).

        Sort-changed listeners are notified after the rows are recomputed.
        """

        direction = SortDirection.coerce(direction)
        self.state.sort_key = as_sort_key(key)
        self.state.sort_direction = direction
        self._apply()
        self.sort_changed.emit()

    def refresh(self) -> None:
        """Recompute with the current parameters."""

        self._apply()

    # -- sort listeners ----------------------------------------------------

    def add_sort_changed_listener(self, callback: Callable[[], Any]) -> None:
        self.sort_changed.connect(callback)

    def remove_sort_changed_listener(self, callback: Callable[[], Any]) -> None:
        self.sort_changed.disconnect(callback)

    # -- reveal ------------------------------------------------------------

    def reveal_item(self, item: Any) -> bool:
        """Switch to the page holding *item*.

        Returns ``False`` when *item* is not part of the filtered rows.
        """

        result = locate(item, self.state)
        if result.page is not None:
            self.set_current_page(result.page)
        return result.found

    # -- internal ----------------------------------------------------------

    def _on_filter_changed(self) -> None:
        if self.state.has_pagination:
            self._assign_page(FIRST_PAGE)
        self._apply()

    def _assign_page(self, page: Optional[int]) -> None:
        self.state.current_page = page
        self.current_page.value = page

    def _subscribe(self, source: Sequence[Record]) -> None:
        subscription = self._observer(source)
        subscription.on_change(self._on_source_mutated)
        self._source_subscription = self.track(subscription)
        self._logger.debug("Subscribed to source changes of %s", type(source).__name__)

    def _release_source_subscription(self) -> None:
        if self._source_subscription is None:
            return
        self.release(self._source_subscription)
        self._source_subscription = None
        self._logger.debug("Released source subscription")

    def _on_source_mutated(self) -> None:
        self._apply()

    def _apply(self) -> None:
        if not self._attached or self.state.source is None:
            return
        result = recompute(self.state)
        self.state.total_items = result.total_items
        self.state.pre_pagination = result.pre_pagination
        self.state.display_data = result.display_data
        self.total_items.value = result.total_items
        self.display_data.value = result.display_data


__all__ = ["TableApi", "TableViewModel"]
