"""CLI utilities for running async operations and formatting output."""

from translate_client.cli.utils.async_runner import coro
from translate_client.cli.utils.formatters import (
    echo_json,
    error,
    info,
    warning,
)

__all__ = [
    "coro",
    "echo_json",
    "error",
    "info",
    "warning",
]
