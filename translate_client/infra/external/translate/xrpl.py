"""Client for the XRP Ledger ecosystem of the Translate API."""

from __future__ import annotations

from typing import Any, ClassVar

from translate_client.core.pagination import PageFilter
from translate_client.infra.external.translate.base import BaseTranslateClient
from translate_client.infra.external.urls import parse_url


class TranslateXRPL(BaseTranslateClient):
    """Translate API client for the XRP Ledger.

    Account feeds page with a ledger ``marker``. The API reports it next to
    the link in ``nextPageSettings`` because the link may carry it encoded
    differently, or not at all:

        {"items": [...], "nextPageSettings": {"marker": "...", "pageSize": 20, "nextPageUrl": "..."}}
    """

    ecosystem: ClassVar[str] = "xrpl"
    page_envelope_fields: ClassVar[list[str]] = ["items", "nextPageSettings"]

    async def get_transaction(
        self, chain: str, tx_hash: str, view_as_account_address: str | None = None
    ) -> dict[str, Any]:
        """Get a classified transaction, optionally from another account's perspective."""
        params = {"viewAsAccountAddress": view_as_account_address} if view_as_account_address else None
        return await self.get(f"{self.normalize_chain(chain)}/tx/{tx_hash}", params=params)

    def read_next_filter(self, payload: dict[str, Any], page_filter: PageFilter) -> PageFilter | None:
        settings = payload.get("nextPageSettings") or {}
        next_url = settings.get("nextPageUrl")
        if not next_url:
            return None
        next_filter = parse_url(next_url, self.service_url).with_sticky_fields(page_filter)
        if settings.get("marker"):
            next_filter = next_filter.model_copy(update={"marker": str(settings["marker"])})
        return next_filter


__all__ = ["TranslateXRPL"]
