"""
Output formatters for attio-cli.
"""

from __future__ import annotations

from attio_cli.formatters.output import (
    OutputFormat,
    confirm_action,
    detect_format,
    extract_output_id,
    output_list,
    output_single,
)

__all__ = [
    "OutputFormat",
    "detect_format",
    "output_list",
    "output_single",
    "extract_output_id",
    "confirm_action",
]
