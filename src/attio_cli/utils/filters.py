"""
Filter and sort expression parsing.

Turns CLI shorthand such as ``name~Acme`` or ``employee_count>=50`` into
Attio's filter JSON, and ``name.last_name:desc`` into a sort object.
"""

from __future__ import annotations

import json
import math
from typing import Any, NamedTuple

from attio_cli.core.exceptions import FilterSyntaxError, SortSyntaxError


class FilterOperator(NamedTuple):
    """A binary filter operator as typed on the command line."""

    token: str
    api_operator: str | None
    numeric: bool = False
    negated: bool = False


# Tried in this order at every position: a token must come before any
# shorter token that is its textual prefix (>= before >, != before =).
OPERATORS: tuple[FilterOperator, ...] = (
    FilterOperator(">=", "$gte", numeric=True),
    FilterOperator("<=", "$lte", numeric=True),
    FilterOperator("!=", None, negated=True),
    FilterOperator(">", "$gt", numeric=True),
    FilterOperator("<", "$lt", numeric=True),
    FilterOperator("!~", "$contains", negated=True),
    FilterOperator("~", "$contains"),
    FilterOperator("^", "$starts_with"),
    FilterOperator("=", None),
)

NOT_EMPTY_SUFFIX = "?"

SORT_DIRECTIONS = ("asc", "desc")


def _find_operator(expression: str) -> tuple[int, FilterOperator] | None:
    """Locate the leftmost operator, preferring the longest token at that spot."""
    for index in range(len(expression)):
        for op in OPERATORS:
            if expression.startswith(op.token, index):
                return index, op
    return None


def _coerce_number(raw: str) -> int | float | str:
    """Return raw as a number when it is a clean finite numeric literal."""
    if not raw or "_" in raw:
        return raw
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        number = float(raw)
    except ValueError:
        return raw
    return number if math.isfinite(number) else raw


def parse_filter(expression: str) -> dict[str, Any]:
    """
    Parse a single filter expression into an Attio filter fragment.

    Supported forms:
        attr=value    -> {"attr": "value"}
        attr!=value   -> {"$not": {"attr": "value"}}
        attr~value    -> {"attr": {"$contains": "value"}}
        attr!~value   -> {"$not": {"attr": {"$contains": "value"}}}
        attr^value    -> {"attr": {"$starts_with": "value"}}
        attr>10       -> {"attr": {"$gt": 10}} (also >=, <, <=)
        attr?         -> {"attr": {"$not_empty": True}}

    Args:
        expression: Filter expression from --filter

    Returns:
        Filter fragment dict

    Raises:
        FilterSyntaxError: If no operator is found or the attribute is empty
    """
    found = _find_operator(expression)

    if found is None:
        if expression.endswith(NOT_EMPTY_SUFFIX):
            attribute = expression[: -len(NOT_EMPTY_SUFFIX)].strip()
            if not attribute:
                raise FilterSyntaxError(expression, "missing attribute")
            return {attribute: {"$not_empty": True}}
        raise FilterSyntaxError(expression)

    index, op = found
    attribute = expression[:index].strip()
    if not attribute:
        raise FilterSyntaxError(expression, "missing attribute")

    raw_value = expression[index + len(op.token) :].strip()
    value: Any = _coerce_number(raw_value) if op.numeric else raw_value

    condition: Any = value if op.api_operator is None else {op.api_operator: value}
    fragment = {attribute: condition}
    if op.negated:
        return {"$not": fragment}
    return fragment


def combine_filters(fragments: list[dict[str, Any]]) -> dict[str, Any]:
    """
    Combine filter fragments with logical AND.

    No fragments give an empty filter and a single fragment is returned
    as-is; only two or more are wrapped in ``$and``.
    """
    if not fragments:
        return {}
    if len(fragments) == 1:
        return fragments[0]
    return {"$and": list(fragments)}


def build_filter(
    filters: list[str] | None = None,
    filter_json: str | None = None,
) -> dict[str, Any]:
    """
    Build the filter for a query from command-line options.

    Raw --filter-json takes precedence and is passed through as given.

    Args:
        filters: Repeated --filter expressions
        filter_json: Raw JSON filter

    Returns:
        Filter dict (empty when nothing was given)

    Raises:
        FilterSyntaxError: If an expression cannot be parsed
        json.JSONDecodeError: If filter_json is not valid JSON
    """
    if filter_json:
        return json.loads(filter_json)
    return combine_filters([parse_filter(f) for f in filters or []])


def parse_sort(expression: str) -> dict[str, str]:
    """
    Parse ``attribute[.field][:direction]`` into an Attio sort object.

    Args:
        expression: Sort expression from --sort

    Returns:
        Dict with "attribute", optional "field" and "direction"

    Raises:
        SortSyntaxError: If the attribute is empty or the direction is unknown
    """
    attr_part, _, direction = expression.partition(":")
    direction = direction.strip().lower() or "asc"
    if direction not in SORT_DIRECTIONS:
        raise SortSyntaxError(expression, f"direction must be one of {', '.join(SORT_DIRECTIONS)}")

    attribute, _, field = attr_part.strip().partition(".")
    if not attribute:
        raise SortSyntaxError(expression, "missing attribute")

    sort: dict[str, str] = {"attribute": attribute}
    if field:
        sort["field"] = field
    sort["direction"] = direction
    return sort


def build_sorts(sorts: list[str] | None) -> list[dict[str, str]]:
    """Parse repeated --sort expressions."""
    return [parse_sort(s) for s in sorts or []]
