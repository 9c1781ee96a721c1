"""Pagination value types shared by the engine and the fetchers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from translate_client.core.pagination.filters import PageFilter

T = TypeVar("T")

IdentityKind = Literal["wallet", "token", "block"]


@dataclass(frozen=True)
class PageIdentity:
    """What a paged collection belongs to.

    Attributes:
        chain: Chain name within the ecosystem (e.g. "eth", "solana").
        target: Wallet address, token address or block number.
        kind: Which of the three the target is.
    """

    chain: str
    target: str | int
    kind: IdentityKind = "wallet"

    @classmethod
    def wallet(cls, chain: str, address: str) -> PageIdentity:
        return cls(chain=chain, target=address, kind="wallet")

    @classmethod
    def token(cls, chain: str, token_address: str) -> PageIdentity:
        return cls(chain=chain, target=token_address, kind="token")

    @classmethod
    def block(cls, chain: str, block_number: int) -> PageIdentity:
        return cls(chain=chain, target=block_number, kind="block")


@dataclass
class PageBatch(Generic[T]):
    """One page as returned by a fetcher.

    Attributes:
        items: Materialized records of the page, in server order.
        next_filter: Filter for the following page, or None on the last page.
    """

    items: list[T] = field(default_factory=list)
    next_filter: PageFilter | None = None


class CursorInfo(BaseModel):
    """Cursor view for external pagination systems.

    Serialize with ``model_dump(by_alias=True)`` to get the camelCase shape:
    ``{"hasNextPage", "hasPreviousPage", "nextCursor", "previousCursor"}``.
    """

    has_next_page: bool = Field(alias="hasNextPage")
    has_previous_page: bool = Field(alias="hasPreviousPage")
    next_cursor: str | None = Field(default=None, alias="nextCursor")
    previous_cursor: str | None = Field(default=None, alias="previousCursor")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


__all__ = ["CursorInfo", "IdentityKind", "PageBatch", "PageIdentity"]
