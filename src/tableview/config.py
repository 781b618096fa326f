"""Default configuration values for tableview."""

from __future__ import annotations

from typing import Final

# Rows per page when neither the host nor the settings specify one.
DEFAULT_PAGE_SIZE: Final[int] = 10

# ``current_page`` values at or below this disable pagination entirely.
PAGINATION_DISABLED: Final[int] = 0

# Page assigned whenever a filter change invalidates the current one.
FIRST_PAGE: Final[int] = 1

VIEW_SETTINGS_SCHEMA_ID: Final[str] = "tableview/view@1"
