"""Shared utilities."""

from translate_client.utils.retry import RetryError, RetryStrategy, retry

__all__ = ["RetryError", "RetryStrategy", "retry"]
