"""Tests for src/domain/models/enums.py."""

from src.domain.models.enums import SortDirection


def test_sort_direction_values():
    assert SortDirection.ASC == "asc"
    assert SortDirection.DESC == "desc"


# --- SortDirection.parse ---

def test_parse_none_falls_back_to_asc():
    assert SortDirection.parse(None) is SortDirection.ASC


def test_parse_is_case_insensitive():
    assert SortDirection.parse("DESC") is SortDirection.DESC


def test_parse_strips_whitespace():
    assert SortDirection.parse("  desc ") is SortDirection.DESC


def test_parse_unknown_value_falls_back_to_asc():
    assert SortDirection.parse("sideways") is SortDirection.ASC


def test_parse_non_string_falls_back_to_asc():
    assert SortDirection.parse(["desc", "asc"]) is SortDirection.ASC
