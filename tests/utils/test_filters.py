"""
Tests for filter and sort expression parsing.
"""

from __future__ import annotations

import json

import pytest

from attio_cli.core.exceptions import FilterSyntaxError, SortSyntaxError
from attio_cli.utils.filters import (
    build_filter,
    build_sorts,
    combine_filters,
    parse_filter,
    parse_sort,
)


class TestParseFilter:
    """Tests for parse_filter."""

    def test_equals(self) -> None:
        """Test attr=value is a plain equality."""
        assert parse_filter("name=Acme") == {"name": "Acme"}

    def test_not_equals(self) -> None:
        """Test != wraps the pair in $not."""
        assert parse_filter("stage!=Lost") == {"$not": {"stage": "Lost"}}

    def test_contains(self) -> None:
        """Test ~ maps to $contains."""
        assert parse_filter("name~Acme") == {"name": {"$contains": "Acme"}}

    def test_not_contains(self) -> None:
        """Test !~ wraps $contains in $not."""
        assert parse_filter("email_addresses!~gmail") == {
            "$not": {"email_addresses": {"$contains": "gmail"}}
        }

    def test_starts_with(self) -> None:
        """Test ^ maps to $starts_with."""
        assert parse_filter("domains^acme") == {"domains": {"$starts_with": "acme"}}

    @pytest.mark.parametrize(
        "expression,expected",
        [
            ("employee_count>50", {"employee_count": {"$gt": 50}}),
            ("employee_count>=50", {"employee_count": {"$gte": 50}}),
            ("employee_count<50", {"employee_count": {"$lt": 50}}),
            ("employee_count<=50", {"employee_count": {"$lte": 50}}),
            ("score>=4.5", {"score": {"$gte": 4.5}}),
        ],
    )
    def test_comparisons(self, expression: str, expected: dict) -> None:
        """Test comparison operators coerce numbers."""
        assert parse_filter(expression) == expected

    def test_comparison_keeps_non_numeric(self) -> None:
        """Test comparisons against dates stay strings."""
        assert parse_filter("created_at>2024-01-01") == {"created_at": {"$gt": "2024-01-01"}}

    @pytest.mark.parametrize("raw", ["inf", "nan", "1_000"])
    def test_comparison_rejects_odd_numerics(self, raw: str) -> None:
        """Test non-finite and underscored literals are not coerced."""
        assert parse_filter(f"count>{raw}") == {"count": {"$gt": raw}}

    def test_equality_value_not_coerced(self) -> None:
        """Test = keeps numeric-looking values as strings."""
        assert parse_filter("zip=02139") == {"zip": "02139"}

    def test_leftmost_operator_wins(self) -> None:
        """Test operators inside the value are part of the value."""
        assert parse_filter("note=a>b") == {"note": "a>b"}
        assert parse_filter("url~https://x.com/?a=1") == {"url": {"$contains": "https://x.com/?a=1"}}

    def test_whitespace_trimmed(self) -> None:
        """Test attribute and value are trimmed."""
        assert parse_filter(" name = Acme ") == {"name": "Acme"}

    def test_empty_value_allowed(self) -> None:
        """Test attr= gives an empty string value."""
        assert parse_filter("name=") == {"name": ""}

    def test_not_empty(self) -> None:
        """Test attr? maps to $not_empty."""
        assert parse_filter("phone_numbers?") == {"phone_numbers": {"$not_empty": True}}

    def test_question_mark_in_value(self) -> None:
        """Test ? is only unary without another operator."""
        assert parse_filter("title=Why?") == {"title": "Why?"}

    @pytest.mark.parametrize("expression", ["name", "", "?", "=Acme", ">5"])
    def test_invalid(self, expression: str) -> None:
        """Test malformed expressions raise FilterSyntaxError."""
        with pytest.raises(FilterSyntaxError) as exc_info:
            parse_filter(expression)
        assert exc_info.value.exit_code == 4


class TestCombineFilters:
    """Tests for combine_filters."""

    def test_empty(self) -> None:
        """Test no fragments give an empty filter."""
        assert combine_filters([]) == {}

    def test_single(self) -> None:
        """Test a single fragment is not wrapped."""
        assert combine_filters([{"a": "1"}]) == {"a": "1"}

    def test_multiple(self) -> None:
        """Test several fragments are wrapped in $and."""
        assert combine_filters([{"a": "1"}, {"b": "2"}]) == {"$and": [{"a": "1"}, {"b": "2"}]}


class TestBuildFilter:
    """Tests for build_filter."""

    def test_expressions(self) -> None:
        """Test repeated --filter options are ANDed."""
        result = build_filter(["name~Acme", "employee_count>=50"])

        assert result == {
            "$and": [
                {"name": {"$contains": "Acme"}},
                {"employee_count": {"$gte": 50}},
            ]
        }

    def test_json_takes_precedence(self) -> None:
        """Test --filter-json wins over --filter."""
        raw = '{"$or": [{"name": "A"}, {"name": "B"}]}'
        assert build_filter(["name=C"], raw) == {"$or": [{"name": "A"}, {"name": "B"}]}

    def test_invalid_json(self) -> None:
        """Test malformed --filter-json raises JSONDecodeError."""
        with pytest.raises(json.JSONDecodeError):
            build_filter(None, "{not json")

    def test_nothing(self) -> None:
        """Test no filter input gives an empty dict."""
        assert build_filter() == {}


class TestParseSort:
    """Tests for sort parsing."""

    def test_attribute_only(self) -> None:
        """Test direction defaults to asc."""
        assert parse_sort("name") == {"attribute": "name", "direction": "asc"}

    def test_field_and_direction(self) -> None:
        """Test attribute.field:desc."""
        assert parse_sort("name.last_name:desc") == {
            "attribute": "name",
            "field": "last_name",
            "direction": "desc",
        }

    def test_direction_case_insensitive(self) -> None:
        """Test direction is normalized to lower case."""
        assert parse_sort("created_at:DESC")["direction"] == "desc"

    @pytest.mark.parametrize("expression", ["name:sideways", ":asc", ".field"])
    def test_invalid(self, expression: str) -> None:
        """Test malformed sorts raise SortSyntaxError."""
        with pytest.raises(SortSyntaxError):
            parse_sort(expression)

    def test_build_sorts(self) -> None:
        """Test repeated --sort options keep their order."""
        assert build_sorts(["a:desc", "b"]) == [
            {"attribute": "a", "direction": "desc"},
            {"attribute": "b", "direction": "asc"},
        ]
        assert build_sorts(None) == []
