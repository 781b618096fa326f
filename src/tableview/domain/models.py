from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable, List, Mapping, Optional, Sequence, Union

from ..config import DEFAULT_PAGE_SIZE, PAGINATION_DISABLED
from ..errors import InvalidSortDirectionError

Record = Mapping[str, Any]


class SortDirection(IntEnum):
    DESCENDING = -1
    NONE = 0
    ASCENDING = 1

    @classmethod
    def coerce(cls, value: Any) -> "SortDirection":
        """Return the member for *value*, accepting plain ints."""

        if isinstance(value, cls):
            return value
        if value is None:
            return cls.NONE
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidSortDirectionError(
                f"Sort direction must be -1, 0 or 1, got {value!r}"
            ) from exc


@dataclass(frozen=True)
class ByField:
    """Sort by looking up *name* on each record."""

    name: str

    def resolve(self, record: Record, direction: SortDirection) -> Any:
        return record.get(self.name)


@dataclass(frozen=True)
class ByFunction:
    """Sort by the value ``fn(record, direction)`` returns."""

    fn: Callable[[Record, int], Any]

    def resolve(self, record: Record, direction: SortDirection) -> Any:
        return self.fn(record, int(direction))


SortKey = Union[ByField, ByFunction]


def as_sort_key(key: Any) -> Optional[SortKey]:
    """Wrap a field name or callable into the matching :data:`SortKey`."""

    if key is None or key == "":
        return None
    if isinstance(key, (ByField, ByFunction)):
        return key
    if callable(key):
        return ByFunction(key)
    return ByField(str(key))


@dataclass
class ViewState:
    """Inputs and outputs of one table view.

    ``source`` is referenced, never copied; everything under "outputs" is
    rewritten by each recompute.
    """

    source: Optional[Sequence[Record]] = None
    filter_text: Optional[str] = None
    filter_keys: List[str] = field(default_factory=list)
    sort_key: Optional[SortKey] = None
    sort_direction: SortDirection = SortDirection.NONE
    current_page: Optional[int] = PAGINATION_DISABLED
    page_size: int = DEFAULT_PAGE_SIZE

    # outputs
    total_items: Optional[int] = None
    display_data: List[Record] = field(default_factory=list)
    pre_pagination: List[Record] = field(default_factory=list)

    @property
    def has_filter(self) -> bool:
        return (
            isinstance(self.filter_text, str)
            and len(self.filter_text.strip()) > 0
            and bool(self.filter_keys)
        )

    @property
    def has_pagination(self) -> bool:
        return bool(self.current_page) and self.current_page > PAGINATION_DISABLED

    @property
    def has_sort(self) -> bool:
        return self.sort_key is not None and self.sort_direction != SortDirection.NONE


__all__ = [
    "ByField",
    "ByFunction",
    "Record",
    "SortDirection",
    "SortKey",
    "ViewState",
    "as_sort_key",
]
