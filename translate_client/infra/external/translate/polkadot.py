"""Client for the Polkadot ecosystem of the Translate API."""

from __future__ import annotations

from typing import Any, ClassVar

from translate_client.core.pagination import PageFilter
from translate_client.infra.external.translate.base import BaseTranslateClient
from translate_client.infra.external.urls import parse_url


class TranslatePOLKADOT(BaseTranslateClient):
    """Translate API client for Polkadot and Substrate chains.

    Paged responses describe the next page under ``nextPageSettings``:

        {"items": [...], "nextPageSettings": {"hasNextPage": true, "endBlock": 399, "nextPageUrl": "..."}}

    Transactions are addressed by block number and extrinsic index.
    """

    ecosystem: ClassVar[str] = "polkadot"
    page_envelope_fields: ClassVar[list[str]] = ["items", "nextPageSettings"]

    async def get_transaction(self, chain: str, block_number: int, index: int) -> dict[str, Any]:
        """Get the classified extrinsic at ``index`` in block ``block_number``."""
        return await self.get(f"{self.normalize_chain(chain)}/tx/{block_number}/{index}")

    def read_next_filter(self, payload: dict[str, Any], page_filter: PageFilter) -> PageFilter | None:
        settings = payload.get("nextPageSettings") or {}
        next_url = settings.get("nextPageUrl")
        if not (settings.get("hasNextPage") and next_url):
            return None
        return parse_url(next_url, self.service_url).with_sticky_fields(page_filter)


__all__ = ["TranslatePOLKADOT"]
