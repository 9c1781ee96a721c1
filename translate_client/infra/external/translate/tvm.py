"""Client for the TVM (Tron) ecosystem of the Translate API."""

from __future__ import annotations

from typing import ClassVar

from translate_client.infra.external.translate.base import BaseTranslateClient


class TranslateTVM(BaseTranslateClient):
    """Translate API client for TVM chains.

    Wallet feeds page with a ``pageKey`` token; the engine treats it like any
    other filter field, so cursors and back-navigation work unchanged.
    """

    ecosystem: ClassVar[str] = "tvm"


__all__ = ["TranslateTVM"]
