"""Custom exception hierarchy for tableview."""

from __future__ import annotations


class TableViewError(Exception):
    """Base class for all custom errors raised by tableview."""


# --- Domain errors ---

class DomainError(TableViewError):
    """Base class for errors in the data-view parameters themselves."""


class InvalidSortDirectionError(DomainError, ValueError):
    """Raised when a sort direction is not one of -1, 0 or 1."""


class InvalidPageSizeError(DomainError, ValueError):
    """Raised when a page size is not a positive integer."""


# --- Settings errors ---

class SettingsError(TableViewError):
    """Base class for view settings related failures."""


class SettingsValidationError(SettingsError):
    """Raised when view settings fail schema validation."""


__all__ = [
    "DomainError",
    "InvalidPageSizeError",
    "InvalidSortDirectionError",
    "SettingsError",
    "SettingsValidationError",
    "TableViewError",
]
