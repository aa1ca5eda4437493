"""
Attio API access: HTTP client and pagination helpers.
"""

from __future__ import annotations

from attio_cli.api.client import AttioClient, unwrap_response
from attio_cli.api.pagination import (
    PaginationLimitWarning,
    paginate,
    paginate_cursor,
)

__all__ = [
    "AttioClient",
    "unwrap_response",
    "paginate",
    "paginate_cursor",
    "PaginationLimitWarning",
]
