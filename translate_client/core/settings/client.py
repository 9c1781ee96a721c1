"""HTTP client settings for the Translate API."""

from __future__ import annotations

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Translate API connection settings.

    Environment variables use TRANSLATE_ prefix.
    Example: TRANSLATE_API_KEY=..., TRANSLATE_TIMEOUT=10
    """

    api_key: SecretStr | None = Field(
        default=None,
        description="API key sent in the apiKey header",
    )
    base_url: str = Field(
        default="https://translate.noves.fi",
        min_length=1,
        description="Service root; the ecosystem is appended as a path segment",
    )
    timeout: float = Field(
        default=30.0,
        gt=0,
        le=300,
        description="Request timeout in seconds",
    )
    max_retries: int = Field(
        default=3,
        ge=1,
        le=10,
        description="Attempts per request on transport errors",
    )

    model_config = SettingsConfigDict(
        env_prefix="TRANSLATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")
