"""Client for the EVM ecosystem of the Translate API."""

from __future__ import annotations

from typing import Any, ClassVar

from translate_client.core.models import HistoryRecord, TokenHolder, Transaction
from translate_client.core.pagination import (
    HistoryPage,
    PageFilter,
    PageIdentity,
    TransactionsPage,
)
from translate_client.infra.external.translate.base import BaseTranslateClient

HISTORY_PATH = "{chain}/history/{target}"
BLOCK_TRANSACTIONS_PATH = "{chain}/block/{target}/txs"
TOKEN_HOLDERS_PATH = "{chain}/token/{target}/holders"

CHAIN_ALIASES: dict[str, str] = {"ethereum": "eth"}


class TranslateEVM(BaseTranslateClient):
    """Translate API client for EVM chains.

    Example:
        ```python
        async with TranslateEVM(api_key) as client:
            page = await client.transactions("eth", "0xabc", PageFilter(page_size=50))
            async for tx in page:
                print(tx.classification_data)
        ```
    """

    ecosystem: ClassVar[str] = "evm"

    def normalize_chain(self, chain: str) -> str:
        chain = chain.lower()
        return CHAIN_ALIASES.get(chain, chain)

    async def get_transaction(
        self, chain: str, tx_hash: str, v5_format: bool = False
    ) -> dict[str, Any]:
        """Get a classified transaction, optionally in the v5 response format."""
        path = f"{self.normalize_chain(chain)}/tx/{tx_hash}"
        if v5_format:
            path = f"{path}?v5Format=true"
        return await self.get(path)

    async def history(
        self, chain: str, wallet: str, page_filter: PageFilter | None = None
    ) -> HistoryPage[HistoryRecord]:
        """First page of a wallet's time-ordered history feed."""
        return await self.paginate(
            HistoryPage, HISTORY_PATH, PageIdentity.wallet(chain, wallet), page_filter, HistoryRecord
        )

    async def history_from_cursor(
        self, chain: str, wallet: str, cursor: str
    ) -> HistoryPage[HistoryRecord]:
        return await self.resume(
            HistoryPage, HISTORY_PATH, PageIdentity.wallet(chain, wallet), cursor, HistoryRecord
        )

    async def block_transactions(
        self, chain: str, block_number: int, page_filter: PageFilter | None = None
    ) -> TransactionsPage[Transaction]:
        """First page of the classified transactions in a block."""
        return await self.paginate(
            TransactionsPage,
            BLOCK_TRANSACTIONS_PATH,
            PageIdentity.block(chain, block_number),
            page_filter,
            Transaction,
        )

    async def token_holders(
        self, chain: str, token_address: str, page_filter: PageFilter | None = None
    ) -> TransactionsPage[TokenHolder]:
        """First page of the holders of a token."""
        return await self.paginate(
            TransactionsPage,
            TOKEN_HOLDERS_PATH,
            PageIdentity.token(chain, token_address),
            page_filter,
            TokenHolder,
        )


__all__ = ["TranslateEVM"]
