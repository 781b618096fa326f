"""Schema helpers for table view settings."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from ..config import DEFAULT_PAGE_SIZE, PAGINATION_DISABLED, VIEW_SETTINGS_SCHEMA_ID
from ..errors import SettingsValidationError

VIEW_SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "tableview/view-settings.schema.json",
    "type": "object",
    "required": ["schema", "page_size", "current_page", "filter_keys", "sort"],
    "properties": {
        "schema": {"const": VIEW_SETTINGS_SCHEMA_ID},
        "page_size": {"type": "integer", "minimum": 1},
        "current_page": {"type": ["integer", "null"], "minimum": 0},
        "filter_text": {"type": ["string", "null"]},
        "filter_keys": {
            "type": "array",
            "items": {"type": "string"},
        },
        "sort": {
            "type": "object",
            "properties": {
                "key": {"type": ["string", "null"]},
                "direction": {"enum": [-1, 0, 1]},
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": True,
}

DEFAULT_VIEW_SETTINGS: dict[str, Any] = {
    "schema": VIEW_SETTINGS_SCHEMA_ID,
    "page_size": DEFAULT_PAGE_SIZE,
    "current_page": PAGINATION_DISABLED,
    "filter_text": None,
    "filter_keys": [],
    "sort": {
        "key": None,
        "direction": 0,
    },
}

_validator = Draft202012Validator(VIEW_SETTINGS_SCHEMA)


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_VIEW_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_VIEW_SETTINGS)
    if data:
        for key, value in data.items():
            if key == "sort" and isinstance(value, dict):
                target = merged.setdefault("sort", {})
                for sub_key, sub_value in value.items():
                    target[sub_key] = sub_value
                continue
            if key == "filter_keys" and isinstance(value, (list, tuple)):
                merged[key] = list(value)
                continue
            merged[key] = value
    validate_settings(merged)
    return merged


def validate_settings(data: dict[str, Any]) -> None:
    """Validate *data* against the view settings schema."""

    try:
        _validator.validate(data)
    except ValidationError as exc:
        raise SettingsValidationError(exc.message) from exc


__all__ = [
    "DEFAULT_VIEW_SETTINGS",
    "VIEW_SETTINGS_SCHEMA",
    "merge_with_defaults",
    "validate_settings",
]
