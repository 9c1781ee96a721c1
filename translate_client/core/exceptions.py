"""Custom exception classes for the translate client."""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorType(StrEnum):
    """Error categories reported by the Translate API."""

    # Authentication errors
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_API_KEY = "INVALID_API_KEY"

    # Rate limiting errors
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Job status errors
    JOB_NOT_FOUND = "JOB_NOT_FOUND"
    JOB_PROCESSING = "JOB_PROCESSING"
    JOB_NOT_READY = "JOB_NOT_READY"

    # Request/Response errors
    INVALID_REQUEST = "INVALID_REQUEST"
    INVALID_RESPONSE_FORMAT = "INVALID_RESPONSE_FORMAT"
    NETWORK_ERROR = "NETWORK_ERROR"

    # General errors
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"


ERROR_MESSAGES: dict[ErrorType, str] = {
    ErrorType.UNAUTHORIZED: "Unauthorized",
    ErrorType.INVALID_API_KEY: "Invalid API Key",
    ErrorType.RATE_LIMIT_EXCEEDED: "Rate limit exceeded",
    ErrorType.JOB_NOT_FOUND: "Job does not exist",
    ErrorType.JOB_PROCESSING: "Job is still processing. Please try again in a few moments.",
    ErrorType.JOB_NOT_READY: "Job not ready yet",
    ErrorType.INVALID_REQUEST: "Invalid request",
    ErrorType.INVALID_RESPONSE_FORMAT: "Invalid response format from API",
    ErrorType.NETWORK_ERROR: "Network error occurred",
    ErrorType.UNKNOWN_ERROR: "An unknown error occurred",
    ErrorType.VALIDATION_ERROR: "Validation error occurred",
}

ERROR_STATUS_CODES: dict[ErrorType, int] = {
    ErrorType.UNAUTHORIZED: 401,
    ErrorType.INVALID_API_KEY: 401,
    ErrorType.RATE_LIMIT_EXCEEDED: 429,
    ErrorType.JOB_NOT_FOUND: 404,
    ErrorType.JOB_PROCESSING: 425,
    ErrorType.JOB_NOT_READY: 425,
    ErrorType.INVALID_REQUEST: 400,
    ErrorType.INVALID_RESPONSE_FORMAT: 500,
    ErrorType.NETWORK_ERROR: 500,
    ErrorType.UNKNOWN_ERROR: 500,
    ErrorType.VALIDATION_ERROR: 400,
}


class TranslateClientError(Exception):
    """Base client exception.

    All custom exceptions should inherit from this class.

    Attributes:
        detail: Human-readable error message.
        extra: Additional context-specific information about the error.
    """

    def __init__(self, detail: str, extra: dict[str, Any] | None = None) -> None:
        """Initialize client exception.

        Args:
            detail: Human-readable error message.
            extra: Additional context about the error.
        """
        self.detail = detail
        self.extra = extra or {}
        super().__init__(detail)


class TransactionError(TranslateClientError):
    """Error returned by the Translate API for a request.

    Example:
            raise TransactionError(
            {"message": ["Rate limit exceeded"]},
            ErrorType.RATE_LIMIT_EXCEEDED,
            http_status_code=429,
        )
    """

    def __init__(
        self,
        errors: dict[str, list[str]],
        error_type: ErrorType = ErrorType.UNKNOWN_ERROR,
        http_status_code: int | None = None,
        details: Any = None,
    ) -> None:
        """Initialize transaction error.

        Args:
            errors: Field name to messages mapping, as returned by the API.
            error_type: Category of the failure.
            http_status_code: HTTP status code of the failed response.
            details: Raw error payload, if any.
        """
        self.errors = errors
        self.error_type = error_type
        self.http_status_code = (
            http_status_code
            if http_status_code is not None
            else ERROR_STATUS_CODES.get(error_type)
        )
        self.details = details
        super().__init__(
            ERROR_MESSAGES.get(error_type, "Transaction validation error"),
            extra={"errors": errors, "error_type": str(error_type)},
        )

    def is_error_type(self, error_type: ErrorType) -> bool:
        """Check if this error is of a specific type."""
        return self.error_type == error_type

    def is_rate_limited(self) -> bool:
        return self.error_type == ErrorType.RATE_LIMIT_EXCEEDED

    def is_auth_error(self) -> bool:
        return self.error_type in (ErrorType.UNAUTHORIZED, ErrorType.INVALID_API_KEY)

    def is_job_pending(self) -> bool:
        """Check if the error means an async job has not finished yet."""
        return self.error_type in (ErrorType.JOB_PROCESSING, ErrorType.JOB_NOT_READY)


class ChainNotFoundError(TranslateClientError):
    """Raised when a chain name is not supported by an ecosystem."""

    def __init__(self, chain_name: str) -> None:
        self.chain_name = chain_name
        super().__init__(
            f'Chain with name "{chain_name}" not found.',
            extra={"chain": chain_name},
        )


class ResponseValidationError(TranslateClientError):
    """Raised when an API response is missing required fields."""

    def __init__(self, missing_fields: list[str], endpoint: str | None = None) -> None:
        self.missing_fields = missing_fields
        self.endpoint = endpoint
        super().__init__(
            f"Invalid response format: missing {', '.join(missing_fields)}",
            extra={"missing_fields": missing_fields, "endpoint": endpoint},
        )


class InvalidCursorError(TranslateClientError, ValueError):
    """Raised when a pagination cursor cannot be decoded.

    A malformed cursor is a caller error: it is never reduced to
    "no more pages".
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid cursor format: {reason}", extra={"reason": reason})
