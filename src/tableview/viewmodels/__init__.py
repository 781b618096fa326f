from .signal import Signal, ObservableProperty
from .base import BaseViewModel
from .collection import CollectionSubscription, ObservableList, observe_collection
from .table_viewmodel import TableApi, TableViewModel

__all__ = [
    "BaseViewModel",
    "CollectionSubscription",
    "ObservableList",
    "ObservableProperty",
    "Signal",
    "TableApi",
    "TableViewModel",
    "observe_collection",
]
