"""
Utility functions for attio-cli.

Provides filter/sort parsing, value flattening, and value-input resolution.
"""

from __future__ import annotations

from attio_cli.utils.filters import (
    build_filter,
    build_sorts,
    combine_filters,
    parse_filter,
    parse_sort,
)
from attio_cli.utils.flatten import (
    flatten_entry,
    flatten_record,
    flatten_single_value,
    flatten_value,
)
from attio_cli.utils.values import (
    load_json_argument,
    parse_scalar,
    parse_sets,
    require_values,
    resolve_values,
)

__all__ = [
    # Filters
    "parse_filter",
    "combine_filters",
    "build_filter",
    "parse_sort",
    "build_sorts",
    # Flattening
    "flatten_value",
    "flatten_single_value",
    "flatten_record",
    "flatten_entry",
    # Values
    "parse_scalar",
    "parse_sets",
    "load_json_argument",
    "resolve_values",
    "require_values",
]
