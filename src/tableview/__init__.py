"""In-memory table data-view engine: filter, sort and paginate records."""

from .core.pipeline import PipelineResult, recompute
from .core.reveal import RevealResult, locate
from .domain.models import ByField, ByFunction, SortDirection, ViewState
from .viewmodels.collection import ObservableList, observe_collection
from .viewmodels.table_viewmodel import TableApi, TableViewModel

__all__ = [
    "ByField",
    "ByFunction",
    "ObservableList",
    "PipelineResult",
    "RevealResult",
    "SortDirection",
    "TableApi",
    "TableViewModel",
    "ViewState",
    "locate",
    "observe_collection",
    "recompute",
]
