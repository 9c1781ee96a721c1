"""Retry and backoff utilities for Translate API calls.

Retries cover transport failures only (timeouts, dropped connections).
API error responses are mapped to TransactionError by the HTTP client and
are not retried.
"""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryError(Exception):
    """Exception raised when all retry attempts are exhausted."""

    def __init__(self, last_exception: Exception, attempts: int) -> None:
        """Initialize retry error.

        Args:
            last_exception: The final exception that caused failure.
            attempts: Number of attempts made.
        """
        self.last_exception = last_exception
        self.attempts = attempts
        super().__init__(f"Failed after {attempts} attempts. Last error: {last_exception}")


class RetryStrategy:
    """Exponential backoff with optional jitter."""

    def __init__(
        self,
        max_attempts: int = 3,
        initial_delay: float = 0.5,
        max_delay: float = 10.0,
        exponential_base: float = 2.0,
        jitter: bool = True,
        exceptions: tuple[type[Exception], ...] = (Exception,),
    ) -> None:
        """Initialize retry strategy.

        Args:
            max_attempts: Maximum number of attempts, the first call included.
            initial_delay: Delay in seconds before the first retry.
            max_delay: Upper bound for a single delay.
            exponential_base: Base for exponential backoff calculation.
            jitter: Whether to add random jitter to delays.
            exceptions: Exception types that trigger a retry.
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.max_attempts = max_attempts
        self.initial_delay = initial_delay
        self.max_delay = max_delay
        self.exponential_base = exponential_base
        self.jitter = jitter
        self.exceptions = exceptions

    def should_retry(self, exception: Exception) -> bool:
        return isinstance(exception, self.exceptions)

    def calculate_delay(self, attempt: int) -> float:
        """Delay before the retry following ``attempt`` (0-indexed)."""
        delay = min(self.initial_delay * (self.exponential_base**attempt), self.max_delay)
        if self.jitter:
            delay = delay * (0.5 + random.random())
        return delay


def retry(
    max_attempts: int = 3,
    initial_delay: float = 0.5,
    max_delay: float = 10.0,
    exponential_base: float = 2.0,
    jitter: bool = True,
    exceptions: tuple[type[Exception], ...] = (Exception,),
    on_retry: Callable[[Exception, int], None] | None = None,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Decorator for retrying async functions with exponential backoff.

    Args:
        max_attempts: Maximum number of attempts, the first call included.
        initial_delay: Delay in seconds before the first retry.
        max_delay: Upper bound for a single delay.
        exponential_base: Base for exponential backoff calculation.
        jitter: Whether to add random jitter to delays.
        exceptions: Exception types that trigger a retry; others propagate at once.
        on_retry: Optional callback called on each retry with (exception, attempt).

    Returns:
        Decorator function.

    Example:
        ```python
        @retry(max_attempts=5, exceptions=(httpx.TransportError,))
        async def fetch(url: str) -> dict:
            ...
        ```
    """
    strategy = RetryStrategy(
        max_attempts=max_attempts,
        initial_delay=initial_delay,
        max_delay=max_delay,
        exponential_base=exponential_base,
        jitter=jitter,
        exceptions=exceptions,
    )

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            for attempt in range(strategy.max_attempts):
                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    if not strategy.should_retry(e):
                        raise

                    if attempt >= strategy.max_attempts - 1:
                        logger.error(
                            f"All retry attempts exhausted for {func.__name__}",
                            extra={
                                "function": func.__name__,
                                "attempts": strategy.max_attempts,
                                "last_exception": str(e),
                            },
                        )
                        raise RetryError(e, strategy.max_attempts) from e

                    delay = strategy.calculate_delay(attempt)
                    logger.warning(
                        f"Retrying {func.__name__} after {delay:.2f}s "
                        f"(attempt {attempt + 1}/{strategy.max_attempts})",
                        extra={
                            "function": func.__name__,
                            "attempt": attempt + 1,
                            "max_attempts": strategy.max_attempts,
                            "delay": delay,
                            "exception": str(e),
                        },
                    )

                    if on_retry:
                        on_retry(e, attempt + 1)

                    await asyncio.sleep(delay)

            raise RuntimeError("Retry logic error: no attempt was made")

        return wrapper

    return decorator


__all__ = ["RetryError", "RetryStrategy", "retry"]
