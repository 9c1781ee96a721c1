"""Client for the SVM (Solana) ecosystem of the Translate API."""

from __future__ import annotations

from typing import ClassVar

from translate_client.infra.external.translate.base import BaseTranslateClient

DEFAULT_CHAIN = "solana"


class TranslateSVM(BaseTranslateClient):
    """Translate API client for SVM chains.

    Transactions are addressed by signature. An empty chain name means
    ``solana``.
    """

    ecosystem: ClassVar[str] = "svm"

    def normalize_chain(self, chain: str) -> str:
        return (chain or DEFAULT_CHAIN).lower()


__all__ = ["DEFAULT_CHAIN", "TranslateSVM"]
