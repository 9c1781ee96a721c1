"""Client for the Cosmos ecosystem of the Translate API."""

from __future__ import annotations

from typing import ClassVar

from translate_client.infra.external.translate.base import BaseTranslateClient


class TranslateCOSMOS(BaseTranslateClient):
    """Translate API client for Cosmos chains.

    Cosmos account feeds page with an opaque ``pageKey`` announced in
    ``nextPageUrl`` rather than block ranges.
    """

    ecosystem: ClassVar[str] = "cosmos"


__all__ = ["TranslateCOSMOS"]
