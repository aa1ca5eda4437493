"""
Tests for offset and cursor pagination helpers.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from attio_cli.api.pagination import PaginationLimitWarning, paginate, paginate_cursor


class TestPaginate:
    """Tests for offset pagination."""

    def test_single_page_passes_limit_and_offset(self) -> None:
        """Test a single fetch uses the caller's limit and offset."""
        fetch = MagicMock(return_value=[{"id": 1}])

        result = paginate(fetch, limit=25, offset=40)

        fetch.assert_called_once_with(25, 40)
        assert result == [{"id": 1}]

    def test_single_page_returns_full_page(self) -> None:
        """Test a full first page does not trigger more requests."""
        fetch = MagicMock(return_value=list(range(25)))

        result = paginate(fetch, limit=25)

        assert fetch.call_count == 1
        assert len(result) == 25

    def test_all_pages_until_short_page(self) -> None:
        """Test --all fetches until a short page."""
        pages = [list(range(500)), list(range(500)), list(range(137))]
        fetch = MagicMock(side_effect=pages)

        result = paginate(fetch, limit=25, offset=99, all_pages=True)

        assert len(result) == 1137
        assert [c.args for c in fetch.call_args_list] == [(500, 0), (500, 500), (500, 1000)]

    def test_all_pages_empty_first_page(self) -> None:
        """Test --all with no results makes one request."""
        fetch = MagicMock(return_value=[])

        assert paginate(fetch, limit=25, all_pages=True) == []
        fetch.assert_called_once_with(500, 0)

    def test_all_pages_exact_multiple(self) -> None:
        """Test a trailing empty page ends the loop."""
        fetch = MagicMock(side_effect=[[1] * 500, []])

        result = paginate(fetch, limit=25, all_pages=True)

        assert len(result) == 500
        assert fetch.call_count == 2

    def test_ceiling_warns(self) -> None:
        """Test fetching stops with a warning at the item ceiling."""
        fetch = MagicMock(return_value=[1] * 10)

        with pytest.warns(PaginationLimitWarning):
            result = paginate(fetch, limit=25, all_pages=True, page_size=10, max_items=30)

        assert len(result) == 30
        assert fetch.call_count == 3


class TestPaginateCursor:
    """Tests for cursor pagination."""

    def test_single_page(self) -> None:
        """Test without --all only the first page is fetched."""
        fetch = MagicMock(return_value=([{"id": "a"}], "next"))

        result = paginate_cursor(fetch, cursor="start")

        fetch.assert_called_once_with("start")
        assert result == [{"id": "a"}]

    def test_follows_cursor(self) -> None:
        """Test --all follows next_cursor until it is None."""
        fetch = MagicMock(
            side_effect=[
                ([{"id": "a"}], "c2"),
                ([{"id": "b"}], "c3"),
                ([{"id": "c"}], None),
            ]
        )

        result = paginate_cursor(fetch, all_pages=True)

        assert [r["id"] for r in result] == ["a", "b", "c"]
        assert [c.args[0] for c in fetch.call_args_list] == [None, "c2", "c3"]

    def test_empty_page_with_cursor_continues(self) -> None:
        """Test an empty page does not end the loop while a cursor remains."""
        fetch = MagicMock(side_effect=[([], "c2"), ([{"id": "b"}], None)])

        result = paginate_cursor(fetch, all_pages=True)

        assert result == [{"id": "b"}]

    def test_ceiling_warns(self) -> None:
        """Test cursor loop stops at the item ceiling."""
        fetch = MagicMock(return_value=([1, 2], "again"))

        with pytest.warns(PaginationLimitWarning):
            result = paginate_cursor(fetch, all_pages=True, max_items=4)

        assert len(result) == 4
