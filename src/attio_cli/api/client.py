"""
Attio REST API client.

Provides a session-based client with bearer-token authentication,
429 retry with exponential backoff, and typed error handling.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any

import requests
from pydantic import SecretStr

from attio_cli.constants import AttioAPIConfig
from attio_cli.core.config import AttioSettings
from attio_cli.core.exceptions import (
    APIConnectionError,
    APIError,
    APINotFoundError,
    APIRateLimitError,
    APITimeoutError,
    APIValidationError,
    InvalidCredentialsError,
    MissingCredentialsError,
)

logger = logging.getLogger(__name__)


def parse_retry_after(value: str | None, now: datetime | None = None) -> float | None:
    """
    Parse a Retry-After header into seconds.

    Args:
        value: Header value, either delta-seconds or an HTTP date
        now: Reference time for HTTP dates (defaults to current UTC time)

    Returns:
        Non-negative delay in seconds, or None if absent or unparseable
    """
    if not value:
        return None
    try:
        return max(0.0, float(value))
    except ValueError:
        pass
    try:
        when = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    return max(0.0, (when - now).total_seconds())


class AttioClient:
    """
    Attio REST API v2 client.

    Usage:
        client = AttioClient("api_key")

        # Responses are unwrapped from the {"data": ...} envelope
        people = client.post("/objects/people/records/query", {"limit": 10})

        # Cursor-paginated endpoints also return the next cursor
        meetings, cursor = client.get_page("/meetings", {"limit": 50})
    """

    DEFAULT_TIMEOUT: int = AttioAPIConfig.DEFAULT_TIMEOUT
    MAX_RETRIES: int = AttioAPIConfig.MAX_RETRIES

    def __init__(
        self,
        api_key: str | SecretStr | None,
        base_url: str = AttioAPIConfig.BASE_URL,
        timeout: int = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the Attio API client.

        Args:
            api_key: Attio API key
            base_url: API base URL
            timeout: Request timeout in seconds

        Raises:
            MissingCredentialsError: If api_key is empty
        """
        if isinstance(api_key, SecretStr):
            api_key = api_key.get_secret_value()
        if not api_key:
            raise MissingCredentialsError()
        self._api_key = SecretStr(api_key)
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = requests.Session()

    @classmethod
    def from_settings(cls, settings: AttioSettings, api_key: str | None = None) -> AttioClient:
        """
        Create client from settings, resolving the API key.

        Args:
            settings: AttioSettings instance
            api_key: Value of the --api-key flag, if given

        Returns:
            Configured AttioClient instance
        """
        return cls(
            api_key=settings.resolve_api_key(api_key),
            base_url=settings.base_url,
            timeout=settings.api_timeout,
        )

    def _build_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key.get_secret_value()}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def _retry_delay(self, response: requests.Response, attempt: int) -> float:
        delay = parse_retry_after(response.headers.get("Retry-After"))
        if delay is None:
            delay = AttioAPIConfig.INITIAL_BACKOFF_SECONDS * (2**attempt)
        return max(AttioAPIConfig.MIN_BACKOFF_SECONDS, delay)

    def _handle_response(self, response: requests.Response) -> Any:
        """
        Handle API response and raise appropriate exceptions.

        Args:
            response: requests.Response object

        Returns:
            Parsed JSON body, or None for 204 No Content

        Raises:
            InvalidCredentialsError: For 401 responses
            APINotFoundError: For 404 responses
            APIValidationError: For 400 and 409 responses
            APIError: For other error responses
        """
        if response.status_code == 401:
            raise InvalidCredentialsError()

        if response.status_code == 204:
            return None

        try:
            data = response.json()
        except ValueError:
            data = None

        if response.ok:
            return data

        body = data if isinstance(data, dict) else {}
        error_type = body.get("type") or "unknown_error"
        detail = body.get("message") or body.get("detail") or response.reason or response.text
        validation_errors = body.get("validation_errors") or []
        if validation_errors:
            parts = []
            for err in validation_errors:
                path = ".".join(str(p) for p in err.get("path") or []) or "?"
                parts.append(f"{path}: {err.get('message', '')}")
            detail = f"{detail} [{'; '.join(parts)}]"

        logger.debug(f"API error body: {data!r}")

        if response.status_code == 404:
            raise APINotFoundError(detail, error_type)
        if response.status_code in (400, 409):
            raise APIValidationError(detail, response.status_code, error_type)
        raise APIError(detail, response.status_code, error_type)

    def request_raw(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json_data: Any = None,
    ) -> Any:
        """
        Make an authenticated request and return the full JSON body.

        Args:
            method: HTTP method (GET, POST, PATCH, PUT, DELETE)
            path: API path (e.g., '/objects/people/records/query')
            params: Query parameters; None values are dropped
            json_data: JSON body for POST/PATCH/PUT requests

        Returns:
            Parsed JSON response body, or None for 204 responses

        Raises:
            APIError: If the API returns an error
            APIRateLimitError: If still rate limited after MAX_RETRIES retries
            APIConnectionError: If connection fails
            APITimeoutError: If request times out
        """
        if not path.startswith("/"):
            path = "/" + path

        url = self.base_url + path
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        logger.debug(f"API {method} {url} params={params!r}")
        if json_data is not None:
            logger.debug(f"API body: {json_data!r}")

        for attempt in range(self.MAX_RETRIES + 1):
            try:
                response = self._session.request(
                    method=method,
                    url=url,
                    headers=self._build_headers(),
                    params=params,
                    json=json_data,
                    timeout=self.timeout,
                )
            except requests.exceptions.Timeout as e:
                raise APITimeoutError(f"Request timed out after {self.timeout}s: {method} {path} ({e})")
            except requests.exceptions.ConnectionError as e:
                raise APIConnectionError(f"Connection failed: {e}")

            logger.debug(f"API {response.status_code} {response.reason}")

            if response.status_code != 429:
                return self._handle_response(response)

            if attempt < self.MAX_RETRIES:
                delay = self._retry_delay(response, attempt)
                logger.debug(f"Rate limited, retrying in {delay:.2f}s")
                time.sleep(delay)

        raise APIRateLimitError(self.MAX_RETRIES, parse_retry_after(response.headers.get("Retry-After")))

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json_data: Any = None,
    ) -> Any:
        """Make a request and unwrap the {"data": ...} envelope when present."""
        return unwrap_response(self.request_raw(method, path, params=params, json_data=json_data))

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Make a GET request."""
        return self.request("GET", path, params=params)

    def post(self, path: str, json_data: Any = None, params: dict[str, Any] | None = None) -> Any:
        """Make a POST request."""
        return self.request("POST", path, params=params, json_data=json_data)

    def put(self, path: str, json_data: Any = None, params: dict[str, Any] | None = None) -> Any:
        """Make a PUT request."""
        return self.request("PUT", path, params=params, json_data=json_data)

    def patch(self, path: str, json_data: Any = None) -> Any:
        """Make a PATCH request."""
        return self.request("PATCH", path, json_data=json_data)

    def delete(self, path: str) -> Any:
        """Make a DELETE request."""
        return self.request("DELETE", path)

    def get_page(self, path: str, params: dict[str, Any] | None = None) -> tuple[Any, str | None]:
        """
        Fetch one page from a cursor-paginated endpoint.

        Args:
            path: API path
            params: Query parameters, including "cursor" for later pages

        Returns:
            Tuple of (data, next_cursor); data defaults to an empty list and
            next_cursor is None on the last page
        """
        body = self.request_raw("GET", path, params=params) or {}
        items = body.get("data")
        if items is None:
            items = []
        pagination = body.get("pagination") or {}
        return items, pagination.get("next_cursor") or None


def unwrap_response(body: Any) -> Any:
    """Return body["data"] when the body is a data envelope, else the body."""
    if isinstance(body, dict) and "data" in body:
        return body["data"]
    return body
