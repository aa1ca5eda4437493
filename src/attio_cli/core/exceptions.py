"""
Exception hierarchy for attio-cli.

All exceptions inherit from AttioError for unified error handling.
Each exception carries the process exit code the CLI maps it to.
"""

from __future__ import annotations

from typing import Any

from attio_cli.constants import ExitCode


class AttioError(Exception):
    """
    Base exception for all attio-cli errors.

    All custom exceptions inherit from this class, allowing callers
    to catch all attio-cli errors with a single except clause.

    Attributes:
        message: Human-readable error description
        context: Optional dictionary with additional error context
        exit_code: Process exit code for this error class
    """

    exit_code: int = ExitCode.GENERAL_ERROR

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(AttioError):
    """Error in configuration values or the config file."""

    pass


class UnknownConfigKeyError(ConfigurationError):
    """Config key is not one the CLI knows how to store."""

    def __init__(self, key: str, supported: list[str]):
        super().__init__(f"Unknown config key: {key}. Supported: {', '.join(supported)}")
        self.key = key


# =============================================================================
# Authentication Errors
# =============================================================================


class AuthenticationError(AttioError):
    """Base class for authentication errors."""

    exit_code = ExitCode.AUTH_ERROR


class InvalidCredentialsError(AuthenticationError):
    """API key was rejected by the server (HTTP 401)."""

    def __init__(self, message: str = "Invalid or expired API key"):
        super().__init__(message)


class MissingCredentialsError(AuthenticationError):
    """No API key found in flag, environment or config file."""

    def __init__(self) -> None:
        super().__init__(
            "No API key configured. Set ATTIO_API_KEY, run 'attio config set api-key <key>', "
            "or pass --api-key <key>"
        )


# =============================================================================
# API Client Errors
# =============================================================================


class APIError(AttioError):
    """
    Non-2xx response from the Attio API.

    Attributes:
        status_code: HTTP status code (if applicable)
        error_type: Attio error type (e.g. "invalid_request_error")
        detail: Error detail from the response body
    """

    def __init__(
        self,
        detail: str,
        status_code: int | None = None,
        error_type: str = "unknown_error",
    ):
        super().__init__(detail, context={"status_code": status_code, "type": error_type})
        self.status_code = status_code
        self.error_type = error_type
        self.detail = detail

    def __str__(self) -> str:
        if self.status_code is None:
            return self.detail
        return f"{self.detail} ({self.status_code})"

    @property
    def exit_code(self) -> int:  # type: ignore[override]
        if self.status_code in (401, 403):
            return ExitCode.AUTH_ERROR
        if self.status_code == 404:
            return ExitCode.NOT_FOUND
        if self.status_code in (400, 409):
            return ExitCode.VALIDATION_ERROR
        if self.status_code == 429:
            return ExitCode.RATE_LIMITED
        return ExitCode.GENERAL_ERROR


class APIConnectionError(APIError):
    """Failed to connect to API endpoint."""

    pass


class APITimeoutError(APIError):
    """API request timed out."""

    pass


class APIRateLimitError(APIError):
    """Still rate limited after exhausting retries."""

    def __init__(self, retries: int, retry_after: float | None = None):
        super().__init__(
            f"Rate limited after {retries} retries. Try again in a few seconds.",
            status_code=429,
            error_type="rate_limit_error",
        )
        self.retries = retries
        self.retry_after = retry_after


class APINotFoundError(APIError):
    """Requested resource does not exist."""

    def __init__(self, detail: str, error_type: str = "not_found"):
        super().__init__(detail, status_code=404, error_type=error_type)


class APIValidationError(APIError):
    """API rejected the request body or parameters (400/409)."""

    pass


# =============================================================================
# Input Parsing Errors
# =============================================================================


class InputError(AttioError):
    """Base class for errors in command-line input."""

    exit_code = ExitCode.VALIDATION_ERROR


class FilterSyntaxError(InputError):
    """Filter expression has no recognized operator."""

    def __init__(self, expression: str, reason: str | None = None):
        message = f'Invalid filter syntax: "{expression}". Expected: attribute<operator>value'
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.expression = expression


class SortSyntaxError(InputError):
    """Sort expression is malformed."""

    def __init__(self, expression: str, reason: str):
        super().__init__(
            f'Invalid sort syntax: "{expression}". Expected: attribute[.field][:asc|desc] ({reason})'
        )
        self.expression = expression


class ValueInputError(InputError):
    """A --set pair or JSON value input is malformed."""

    pass


class NoValuesProvidedError(InputError):
    """A mutating command resolved to an empty values object."""

    def __init__(self) -> None:
        super().__init__(
            "No values provided. Use --set key=value, --values '{\"key\":\"value\"}', "
            "or pipe JSON to stdin."
        )
