"""
Pagination helpers for Attio list endpoints.

Attio uses two pagination protocols: integer offsets (records, entries,
notes, tasks) and opaque cursors (meetings, call recordings). Each has
its own loop because they terminate on different signals.
"""

from __future__ import annotations

import warnings
from typing import Callable, TypeVar

from attio_cli.constants import PaginationConfig

T = TypeVar("T")

PAGE_SIZE = PaginationConfig.PAGE_SIZE
MAX_PAGINATED_ITEMS = PaginationConfig.MAX_PAGINATED_ITEMS


class PaginationLimitWarning(UserWarning):
    """Fetching stopped at the item ceiling; results are partial."""


def _warn_limit(max_items: int) -> None:
    warnings.warn(
        f"Stopped after {max_items} items; results may be incomplete. "
        "Narrow the query with --filter to fetch the rest.",
        PaginationLimitWarning,
        stacklevel=3,
    )


def paginate(
    fetch_page: Callable[[int, int], list[T]],
    limit: int,
    offset: int = 0,
    all_pages: bool = False,
    page_size: int = PAGE_SIZE,
    max_items: int = MAX_PAGINATED_ITEMS,
) -> list[T]:
    """
    Fetch one page, or every page, from an offset-paginated endpoint.

    Without all_pages this is a single fetch_page(limit, offset) call and
    its result is returned verbatim. With all_pages the caller's limit and
    offset are ignored: fixed-size pages are fetched from offset 0 until a
    page comes back shorter than page_size.

    Args:
        fetch_page: Callable taking (limit, offset) and returning one page
        limit: Page size for a single fetch
        offset: Starting offset for a single fetch
        all_pages: Fetch every page
        page_size: Page size used when fetching every page
        max_items: Ceiling on accumulated items before stopping with a
            PaginationLimitWarning

    Returns:
        Concatenated items
    """
    if not all_pages:
        return fetch_page(limit, offset)

    results: list[T] = []
    page_offset = 0
    while True:
        page = fetch_page(page_size, page_offset)
        results.extend(page)
        if len(page) < page_size:
            break
        if len(results) >= max_items:
            _warn_limit(max_items)
            break
        page_offset += page_size

    return results


def paginate_cursor(
    fetch_page: Callable[[str | None], tuple[list[T], str | None]],
    cursor: str | None = None,
    all_pages: bool = False,
    max_items: int = MAX_PAGINATED_ITEMS,
) -> list[T]:
    """
    Fetch one page, or every page, from a cursor-paginated endpoint.

    Args:
        fetch_page: Callable taking a cursor (None for the first page) and
            returning (items, next_cursor)
        cursor: Cursor to start from
        all_pages: Keep following next_cursor until the server returns none
        max_items: Ceiling on accumulated items before stopping with a
            PaginationLimitWarning

    Returns:
        Concatenated items
    """
    items, next_cursor = fetch_page(cursor)
    if not all_pages:
        return items

    results: list[T] = list(items)
    while next_cursor:
        if len(results) >= max_items:
            _warn_limit(max_items)
            break
        items, next_cursor = fetch_page(next_cursor)
        results.extend(items)

    return results
