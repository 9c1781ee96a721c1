"""LRU-cached settings loaders.

Settings are loaded and validated once, then cached for the lifetime of the process.

Testing:
    In tests, clear the cache to force reload:
    get_pagination_settings.cache_clear()

    Or override with custom values:
    settings = PaginationSettings(max_navigation_history=3)
"""

from __future__ import annotations

from functools import lru_cache

from .client import ClientSettings
from .logs import LoggingSettings
from .pagination import PaginationSettings


@lru_cache(maxsize=1)
def get_client_settings() -> ClientSettings:
    """Get cached Translate API client settings.

    Returns:
        Validated and frozen ClientSettings instance.
    """
    return ClientSettings()


@lru_cache(maxsize=1)
def get_pagination_settings() -> PaginationSettings:
    """Get cached pagination settings.

    Returns:
        Validated and frozen PaginationSettings instance.
    """
    return PaginationSettings()


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings.

    Returns:
        Validated and frozen LoggingSettings instance.
    """
    return LoggingSettings()


def clear_all_caches() -> None:
    """Clear every cached settings instance (useful in tests)."""
    get_client_settings.cache_clear()
    get_pagination_settings.cache_clear()
    get_logging_settings.cache_clear()
