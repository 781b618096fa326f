"""Tests for view settings validation."""

import pytest

from tableview.config import DEFAULT_PAGE_SIZE
from tableview.errors import SettingsValidationError
from tableview.settings.schema import (
    DEFAULT_VIEW_SETTINGS,
    merge_with_defaults,
    validate_settings,
)


def test_defaults_are_valid():
    validate_settings(DEFAULT_VIEW_SETTINGS)


def test_merge_none_returns_defaults():
    merged = merge_with_defaults(None)
    assert merged == DEFAULT_VIEW_SETTINGS
    assert merged is not DEFAULT_VIEW_SETTINGS
    assert merged["page_size"] == DEFAULT_PAGE_SIZE


def test_merge_overrides_sort_fields_individually():
    merged = merge_with_defaults({"sort": {"key": "age"}})
    assert merged["sort"] == {"key": "age", "direction": 0}


def test_merge_accepts_tuple_filter_keys():
    merged = merge_with_defaults({"filter_keys": ("name", "city")})
    assert merged["filter_keys"] == ["name", "city"]


def test_merge_does_not_mutate_defaults():
    merge_with_defaults({"sort": {"key": "age", "direction": 1}})
    assert DEFAULT_VIEW_SETTINGS["sort"] == {"key": None, "direction": 0}


def test_extra_keys_are_kept():
    merged = merge_with_defaults({"columns": ["name"]})
    assert merged["columns"] == ["name"]


@pytest.mark.parametrize(
    "override",
    [
        {"page_size": 0},
        {"page_size": "ten"},
        {"current_page": -1},
        {"filter_keys": [1, 2]},
        {"filter_text": 5},
        {"sort": {"direction": 2}},
        {"sort": {"key": "a", "unknown": True}},
        {"schema": "tableview/view@0"},
    ],
)
def test_invalid_settings_raise(override):
    with pytest.raises(SettingsValidationError):
        merge_with_defaults(override)
