"""Record models returned by the Translate API.

The API schemas differ per ecosystem and version, so the models only pin the
fields the client relies on and keep everything else as extra attributes.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class APIModel(BaseModel):
    """Base for API records: camelCase aliases, unknown fields kept."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class Chain(APIModel):
    """A chain supported by an ecosystem."""

    name: str
    ecosystem: str | None = None
    native_coin: dict[str, Any] | None = Field(default=None, alias="nativeCoin")


class Transaction(APIModel):
    """A classified transaction."""

    tx_type_version: int | None = Field(default=None, alias="txTypeVersion")
    chain: str | None = None
    account_address: str | None = Field(default=None, alias="accountAddress")
    classification_data: dict[str, Any] | None = Field(default=None, alias="classificationData")
    raw_transaction_data: dict[str, Any] | None = Field(default=None, alias="rawTransactionData")


class HistoryRecord(APIModel):
    """One entry of a wallet's time-ordered history feed."""

    transaction_hash: str | None = Field(default=None, alias="transactionHash")
    block_number: int | None = Field(default=None, alias="blockNumber")
    timestamp: int | None = None


class TokenHolder(APIModel):
    """A holder of a token and its balance."""

    address: str
    balance: str | None = None


__all__ = ["APIModel", "Chain", "HistoryRecord", "TokenHolder", "Transaction"]
