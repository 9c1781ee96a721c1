"""Modular Pydantic Settings v2 configuration.

Import settings via cached loaders:
    from translate_client.core.settings import get_client_settings

Configuration precedence (highest to lowest):
    1. init kwargs (testing/overrides)
    2. Environment variables
    3. .env file
"""

from __future__ import annotations

from .client import ClientSettings
from .loader import (
    clear_all_caches,
    get_client_settings,
    get_logging_settings,
    get_pagination_settings,
)
from .logs import LoggingSettings
from .pagination import PaginationSettings

__all__ = [
    "ClientSettings",
    "LoggingSettings",
    "PaginationSettings",
    "clear_all_caches",
    "get_client_settings",
    "get_logging_settings",
    "get_pagination_settings",
]
