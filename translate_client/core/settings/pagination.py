"""Pagination settings for cursor export.

Environment variables use PAGINATION_ prefix.
Example: PAGINATION_MAX_NAVIGATION_HISTORY=20
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaginationSettings(BaseSettings):
    """Pagination configuration settings.

    Attributes:
        max_navigation_history: Pages of history embedded in an exported cursor
            when the filter does not set its own limit.
        cursor_size_warning_bytes: Encoded cursor size above which a
            diagnostic is emitted.
    """

    max_navigation_history: int = Field(
        default=10,
        ge=1,
        le=1000,
        description="Default number of history entries embedded in a cursor",
    )
    cursor_size_warning_bytes: int = Field(
        default=5 * 1024,
        ge=1,
        description="Encoded cursor size that triggers an oversize diagnostic",
    )

    model_config = SettingsConfigDict(
        env_prefix="PAGINATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )
