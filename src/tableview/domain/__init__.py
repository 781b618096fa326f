from .models import (
    ByField,
    ByFunction,
    Record,
    SortDirection,
    SortKey,
    ViewState,
    as_sort_key,
)

__all__ = [
    "ByField",
    "ByFunction",
    "Record",
    "SortDirection",
    "SortKey",
    "ViewState",
    "as_sort_key",
]
