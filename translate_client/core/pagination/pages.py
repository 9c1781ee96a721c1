"""Typed page adapters binding the pagination engine to a fetcher.

``TransactionsPage`` covers the ordinary paged collections (wallet
transactions, block transactions, token holders). ``HistoryPage`` covers the
time-ordered wallet history feed, which is only addressable by wallet.
"""

from __future__ import annotations

from typing import Self, TypeVar

from translate_client.core.pagination.cursor import CursorCodec, EnhancedCursor, LegacyCursor
from translate_client.core.pagination.engine import PageFetcher, Pagination
from translate_client.core.pagination.filters import PageFilter
from translate_client.core.pagination.schemas import PageBatch, PageIdentity

T = TypeVar("T")


class TransactionsPage(Pagination[T]):
    """Pagination object for transactions, block transactions and token holders."""

    @classmethod
    def check_identity(cls, identity: PageIdentity) -> None:
        """Reject identities this adapter cannot page over."""

    def __init__(
        self,
        fetcher: PageFetcher[T],
        identity: PageIdentity,
        first_page: PageBatch[T],
        page_filter: PageFilter,
        **kwargs,
    ) -> None:
        self.check_identity(identity)
        super().__init__(fetcher, identity, first_page, page_filter, **kwargs)

    @classmethod
    async def create(
        cls,
        fetcher: PageFetcher[T],
        identity: PageIdentity,
        page_filter: PageFilter | None = None,
        *,
        codec: CursorCodec | None = None,
    ) -> Self:
        """Fetch the first page and return an adapter positioned on it.

        Errors from the initial fetch propagate to the caller.
        """
        cls.check_identity(identity)
        page_filter = page_filter or PageFilter()
        batch = await fetcher.fetch(identity, page_filter)
        return cls(fetcher, identity, batch, page_filter, codec=codec)

    @classmethod
    async def from_cursor(
        cls,
        fetcher: PageFetcher[T],
        identity: PageIdentity,
        cursor: str,
        *,
        codec: CursorCodec | None = None,
    ) -> Self:
        """Resume a traversal from an exported cursor.

        A legacy cursor starts a fresh history at its filter. An enhanced
        cursor restores the embedded history window, so ``has_previous()``
        and ``previous()`` work right away for the pages it carries. When
        the window was truncated to the target page alone, the cursor's
        ``previousPageOptions`` is restored in front of it.

        Raises:
            InvalidCursorError: If the cursor is malformed.
        """
        cls.check_identity(identity)
        history: list[PageFilter] | None
        offset = 0
        match CursorCodec.parse(cursor):
            case EnhancedCursor(page_filter=page_filter, meta=meta):
                window = list(meta.navigation_history[: meta.current_page_index + 1])
                if not window or window[-1] != page_filter:
                    window.append(page_filter)
                offset = meta.history_start_index or 0
                # A window truncated down to the target still names the page before it.
                previous = meta.previous_page_options
                if len(window) == 1 and previous is not None and previous != page_filter:
                    window.insert(0, previous)
                    offset = max(offset - 1, 0)
                history = window
            case LegacyCursor(page_filter=page_filter):
                history = None

        batch = await fetcher.fetch(identity, page_filter)
        return cls(
            fetcher,
            identity,
            batch,
            page_filter,
            history=history,
            history_offset=offset,
            codec=codec,
        )


class HistoryPage(TransactionsPage[T]):
    """Pagination object for the time-ordered wallet history feed."""

    @classmethod
    def check_identity(cls, identity: PageIdentity) -> None:
        if identity.kind != "wallet":
            raise ValueError(
                f"History is only available for wallet identities, got {identity.kind!r}"
            )


__all__ = ["HistoryPage", "TransactionsPage"]
