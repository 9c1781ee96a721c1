"""Client for the UTXO ecosystem (Bitcoin and friends) of the Translate API."""

from __future__ import annotations

from typing import ClassVar

from translate_client.infra.external.translate.base import BaseTranslateClient


class TranslateUTXO(BaseTranslateClient):
    ecosystem: ClassVar[str] = "utxo"


__all__ = ["TranslateUTXO"]
