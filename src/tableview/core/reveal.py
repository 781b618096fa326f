"""Locate the page that holds a given record."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional

from ..domain.models import ViewState


@dataclass(frozen=True)
class RevealResult:
    found: bool
    page: Optional[int] = None


def index_of(item: Any, rows) -> int:
    """Return the position of *item* in *rows* by identity, or ``-1``."""

    for index, row in enumerate(rows):
        if row is item:
            return index
    return -1


def locate(item: Any, state: ViewState) -> RevealResult:
    """Find the page containing *item* in the last pre-pagination snapshot.

    Without pagination every row is on the single implicit page, so the
    result is found with no page number.  ``state`` is never modified.
    """

    if not state.has_pagination:
        return RevealResult(found=True)

    index = index_of(item, state.pre_pagination)
    if index == -1:
        return RevealResult(found=False)
    return RevealResult(found=True, page=math.ceil((index + 1) / state.page_size))


__all__ = ["RevealResult", "index_of", "locate"]
