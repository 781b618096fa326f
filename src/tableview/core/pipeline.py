"""Derivation pipeline turning a :class:`ViewState` into display rows.

Stages run in a fixed order: copy, filter, sort, paginate.  Each stage is a
plain function so the view model (and tests) can use them individually;
:func:`recompute` chains them without touching the state it is given.
"""

from __future__ import annotations

import locale
import logging
import math
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Any, List, Optional, Sequence

from ..domain.models import Record, SortDirection, SortKey, ViewState

LOGGER = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Outputs of a single recompute."""

    display_data: List[Record] = field(default_factory=list)
    total_items: Optional[int] = None
    pre_pagination: List[Record] = field(default_factory=list)


def copy_source(source: Sequence[Record]) -> List[Record]:
    return list(source)


def matches_filter(record: Record, filter_text: str, filter_keys: Sequence[str]) -> bool:
    """Return ``True`` when any of *filter_keys* contains *filter_text*.

    Matching is a case-insensitive substring test on ``str(value)``; missing
    and ``None`` values never match.
    """

    needle = filter_text.casefold()
    for key in filter_keys:
        value = record.get(key)
        if value is None:
            continue
        if needle in str(value).casefold():
            return True
    return False


def apply_filter(
    records: List[Record], filter_text: str, filter_keys: Sequence[str]
) -> List[Record]:
    return [record for record in records if matches_filter(record, filter_text, filter_keys)]


def is_numeric(value: Any) -> bool:
    """Return ``True`` if *value* reads as a finite number.

    Numeric strings such as ``"42"`` or ``" 3.5 "`` count; booleans do not.
    """

    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return math.isfinite(value)
    if isinstance(value, str):
        # float() accepts digit separators, which are not numbers to a reader.
        if "_" in value:
            return False
        try:
            number = float(value)
        except ValueError:
            return False
        return math.isfinite(number)
    return False


def collate(str1: str, str2: str) -> int:
    """Compare strings in dictionary order.

    Case is ignored first; the raw collation only breaks ties, so
    ``"apple" < "banana" < "Cherry"``.
    """

    primary = locale.strcoll(str1.casefold(), str2.casefold())
    if primary:
        return primary
    return locale.strcoll(str1, str2)


def compare_values(val1: Any, val2: Any) -> float:
    """Three-way compare two resolved sort values in ascending order."""

    if val1 is None:
        val1 = ""
    if val2 is None:
        val2 = ""
    if is_numeric(val1) and is_numeric(val2):
        return float(val1) - float(val2)
    return collate(str(val1), str(val2))


def apply_sort(
    records: List[Record], sort_key: SortKey, direction: SortDirection
) -> List[Record]:
    """Sort *records* in place and return them.

    Each record's value is resolved once; ``list.sort`` keeps equal records
    in their filtered order.
    """

    factor = int(direction)
    decorated = [(sort_key.resolve(record, direction), record) for record in records]
    decorated.sort(key=cmp_to_key(lambda a, b: compare_values(a[0], b[0]) * factor))
    records[:] = [record for _, record in decorated]
    return records


def paginate(records: List[Record], current_page: int, page_size: int) -> List[Record]:
    if len(records) <= page_size:
        return records
    start = (current_page - 1) * page_size
    end = start + page_size
    return records[start:end]


def recompute(state: ViewState) -> PipelineResult:
    """Derive display rows, total count and pre-pagination snapshot.

    A state without a source yields its current outputs unchanged.
    """

    if state.source is None:
        return PipelineResult(
            display_data=state.display_data,
            total_items=state.total_items,
            pre_pagination=state.pre_pagination,
        )

    rows = copy_source(state.source)

    if state.has_filter:
        rows = apply_filter(rows, state.filter_text, state.filter_keys)

    if state.has_sort:
        apply_sort(rows, state.sort_key, state.sort_direction)

    total_items = len(rows)
    pre_pagination = list(rows)

    if state.has_pagination:
        rows = paginate(rows, state.current_page, state.page_size)

    LOGGER.debug(
        "Recomputed view: %d of %d source rows match, %d displayed (page=%s, size=%s)",
        total_items,
        len(state.source),
        len(rows),
        state.current_page,
        state.page_size,
    )
    return PipelineResult(
        display_data=rows,
        total_items=total_items,
        pre_pagination=pre_pagination,
    )


__all__ = [
    "PipelineResult",
    "apply_filter",
    "apply_sort",
    "collate",
    "compare_values",
    "copy_source",
    "is_numeric",
    "matches_filter",
    "paginate",
    "recompute",
]
