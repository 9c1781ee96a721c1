"""Base HTTP client for the Translate API.

Provides:
- Connection pooling
- Retry logic with exponential backoff on transport errors
- Request/response logging
- Timeout configuration
- Mapping of API error responses to TransactionError
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from translate_client.core.exceptions import ErrorType, TransactionError
from translate_client.utils.retry import retry

logger = logging.getLogger(__name__)

RETRYABLE_EXCEPTIONS: tuple[type[Exception], ...] = (
    httpx.TimeoutException,
    httpx.NetworkError,
    httpx.RemoteProtocolError,
)


def map_error_response(status_code: int, payload: Any) -> TransactionError:
    """Translate an API error payload into a TransactionError.

    Args:
        status_code: HTTP status code of the response.
        payload: Decoded JSON body, or None if the body was not JSON.

    Returns:
        TransactionError with the matching ErrorType.
    """
    body = payload if isinstance(payload, dict) else {}
    message = body.get("message")
    text = message if isinstance(message, str) else ""

    if text == "Unauthorized":
        return TransactionError({"message": ["Invalid API Key"]}, ErrorType.INVALID_API_KEY, status_code)
    if text == "Rate limit exceeded" or status_code == 429:
        return TransactionError(
            {"message": ["Rate limit exceeded"]}, ErrorType.RATE_LIMIT_EXCEEDED, status_code
        )
    if text == "Job not ready yet":
        return TransactionError(
            {"message": ["Job is still processing. Please try again in a few moments."]},
            ErrorType.JOB_NOT_READY,
            status_code,
        )
    if text == "Invalid response format":
        return TransactionError(
            {"message": ["Invalid response format from API"]},
            ErrorType.INVALID_RESPONSE_FORMAT,
            status_code,
        )
    if "does not exist" in text:
        return TransactionError({"message": [text]}, ErrorType.JOB_NOT_FOUND, status_code)
    if "Job is still processing" in text:
        return TransactionError({"message": [text]}, ErrorType.JOB_PROCESSING, status_code)
    if isinstance(body.get("errors"), dict):
        return TransactionError(body["errors"], ErrorType.VALIDATION_ERROR, status_code, body)
    if status_code == 401:
        return TransactionError({"message": ["Unauthorized"]}, ErrorType.UNAUTHORIZED, status_code)
    if status_code == 400:
        return TransactionError(
            {"message": [body.get("title") or text or "Request failed"]},
            ErrorType.INVALID_REQUEST,
            status_code,
            body or None,
        )
    if body.get("detail"):
        return TransactionError(
            {"message": [str(body["detail"])]}, ErrorType.UNKNOWN_ERROR, status_code, body
        )
    return TransactionError(
        {"message": [text or "Request failed"]}, ErrorType.UNKNOWN_ERROR, status_code, body or None
    )


class BaseHTTPClient:
    """Base HTTP client for external API integrations.

    Example:
        ```python
        async with BaseHTTPClient("https://translate.noves.fi/evm") as client:
            chains = await client.get("chains")
        ```
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        max_retries: int = 3,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize HTTP client.

        Args:
            base_url: Base URL for the API.
            timeout: Request timeout in seconds.
            max_retries: Maximum number of attempts on transport errors.
            headers: Default headers to include in all requests.
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests).
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self.default_headers = headers or {}

        # Create async client with connection pooling
        self.client = httpx.AsyncClient(
            base_url=self.base_url + "/",
            timeout=httpx.Timeout(timeout),
            headers=self.default_headers,
            limits=httpx.Limits(
                max_keepalive_connections=20,
                max_connections=100,
            ),
            transport=transport,
        )
        self._get_with_retry = retry(
            max_attempts=max_retries,
            initial_delay=0.5,
            max_delay=10.0,
            exceptions=RETRYABLE_EXCEPTIONS,
        )(self._get_once)

    async def close(self) -> None:
        """Close the HTTP client and release connections."""
        await self.client.aclose()

    async def __aenter__(self) -> BaseHTTPClient:
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager and close client."""
        await self.close()

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Make GET request to the API.

        Args:
            path: Endpoint path relative to the base URL.
            params: Query parameters.
            headers: Additional headers for this request.

        Returns:
            JSON response data.

        Raises:
            TransactionError: On an error response from the API, or a success
                response whose body is not JSON.
            RetryError: When transport errors persist across all attempts.
        """
        return await self._get_with_retry(path, params=params, headers=headers)

    async def _get_once(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        path = path.lstrip("/")
        logger.debug(
            f"GET request to {self.base_url}/{path}",
            extra={"path": path, "params": params},
        )

        response = await self.client.get(path, params=params, headers=headers)

        logger.debug(
            f"GET response from {self.base_url}/{path}",
            extra={
                "path": path,
                "status_code": response.status_code,
                "duration_ms": response.elapsed.total_seconds() * 1000,
            },
        )

        if response.is_error:
            try:
                payload = response.json()
            except ValueError:
                payload = {"message": response.text or response.reason_phrase}
            error = map_error_response(response.status_code, payload)
            logger.info(
                f"GET {path} failed with {response.status_code}",
                extra={
                    "path": path,
                    "status_code": response.status_code,
                    "error_type": str(error.error_type),
                },
            )
            raise error

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise TransactionError(
                {"message": ["Invalid response format from API"]},
                ErrorType.INVALID_RESPONSE_FORMAT,
                response.status_code,
            ) from e


__all__ = ["BaseHTTPClient", "RETRYABLE_EXCEPTIONS", "map_error_response"]
