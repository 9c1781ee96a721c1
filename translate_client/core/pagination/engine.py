"""Bidirectional pagination engine over one-way, server-driven page fetches.

The engine owns the current page of items, the filter that produced it, the
filter for the next page (as announced by the server) and the navigation
history of every page visited. Traversal calls are atomic: a page becomes
current only after its fetch succeeds, so a failed or cancelled fetch leaves
the engine exactly as it was.

Pages are not cached. ``previous()`` re-fetches the earlier page, so it shows
the remote collection as it is now, which may differ from what was shown
the first time if the data changed in between.

Instances are not safe for concurrent ``next()``/``previous()`` calls; await
each call before issuing the next one.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Sequence
from typing import Generic, Protocol, TypeVar

from translate_client.core.pagination.cursor import CursorCodec
from translate_client.core.pagination.filters import PageFilter
from translate_client.core.pagination.schemas import CursorInfo, PageBatch, PageIdentity
from translate_client.core.settings import get_pagination_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class PageFetcher(Protocol[T_co]):
    """Performs exactly one page request for a collection.

    Implementations must be deterministic with respect to ``page_filter`` for
    a fixed server state. They may raise on transport or validation errors.
    """

    async def fetch(self, identity: PageIdentity, page_filter: PageFilter) -> PageBatch[T_co]:
        """Fetch one page.

        Returns:
            The page items and the filter for the next page (None on the last page).
        """
        ...


def default_codec() -> CursorCodec:
    """Build a cursor codec from the cached pagination settings."""
    settings = get_pagination_settings()
    return CursorCodec(
        default_max_history=settings.max_navigation_history,
        size_warning_bytes=settings.cursor_size_warning_bytes,
    )


class Pagination(Generic[T]):
    """Stateful navigator over a paged collection.

    Usage:
        page = await TransactionsPage.create(fetcher, identity, PageFilter(page_size=50))
        print(page.get_transactions())

        while await page.next():
            print(page.get_transactions())

        cursor = page.get_previous_cursor()  # persist or hand out

    Attributes:
        fetcher: Page fetcher used for every traversal.
        identity: Chain and target the collection belongs to.
        codec: Cursor codec used for exported cursors.
        last_error: Cause of the most recent failed traversal, if any.
    """

    decode_cursor = staticmethod(CursorCodec.decode)
    is_enhanced_cursor = staticmethod(CursorCodec.is_enhanced)

    def __init__(
        self,
        fetcher: PageFetcher[T],
        identity: PageIdentity,
        first_page: PageBatch[T],
        page_filter: PageFilter,
        *,
        history: Sequence[PageFilter] | None = None,
        history_offset: int = 0,
        codec: CursorCodec | None = None,
    ) -> None:
        """Initialize the engine from an already fetched page.

        Args:
            fetcher: Page fetcher for subsequent pages.
            identity: Chain and target of the collection.
            first_page: The page fetched with ``page_filter``.
            page_filter: Filter of the current page.
            history: Navigation history to resume from; must contain
                ``page_filter``. Defaults to a fresh history.
            history_offset: Pages dropped before ``history[0]`` in the true
                traversal (for engines resumed from a truncated cursor).
            codec: Cursor codec; defaults to one built from settings.
        """
        self.fetcher = fetcher
        self.identity = identity
        self.codec = codec or default_codec()
        self.last_error: Exception | None = None

        self._items: list[T] = list(first_page.items)
        self._current_filter = page_filter
        self._next_filter = first_page.next_filter
        self._history: list[PageFilter] = list(history) if history else [page_filter]
        if page_filter not in self._history:
            self._history.append(page_filter)
        self._history_offset = history_offset

        index = self.get_current_page_index()
        self._previous_filter = self._history[index - 1] if index > 0 else None

    async def _fetch(self, page_filter: PageFilter) -> PageBatch[T]:
        return await self.fetcher.fetch(self.identity, page_filter)

    def _record_failure(self, direction: str, page_filter: PageFilter, error: Exception) -> None:
        self.last_error = error
        logger.warning(
            f"Failed to fetch {direction} page for {self.identity.chain}/{self.identity.target}",
            extra={
                "direction": direction,
                "chain": self.identity.chain,
                "target": str(self.identity.target),
                "filter": page_filter.to_wire(),
                "exception": str(error),
                "exception_type": type(error).__name__,
            },
        )

    # ──────────────────────────────────────────────────────────────
    # Traversal
    # ──────────────────────────────────────────────────────────────

    async def next(self) -> bool:
        """Fetch the next page and make it current.

        Returns:
            True if the next page was fetched, False if there is no next page
            or the fetch failed (state is unchanged in both cases).
        """
        target = self._next_filter
        if target is None:
            return False

        self.last_error = None
        try:
            batch = await self._fetch(target)
        except Exception as e:
            self._record_failure("next", target, e)
            return False

        index = self.get_current_page_index()
        self._previous_filter = self._current_filter
        self._current_filter = target
        self._items = list(batch.items)
        self._next_filter = batch.next_filter

        # After previous(), the next page is already recorded right after us.
        if not (0 <= index < len(self._history) - 1 and self._history[index + 1] == target):
            self._history.append(target)
        return True

    async def previous(self) -> bool:
        """Re-fetch the previous page and make it current.

        Returns:
            True if the previous page was fetched, False on the first page or
            if the fetch failed (state is unchanged in both cases).
        """
        index = self.get_current_page_index()
        if index <= 0:
            return False

        target = self._history[index - 1]
        self.last_error = None
        try:
            batch = await self._fetch(target)
        except Exception as e:
            self._record_failure("previous", target, e)
            return False

        self._items = list(batch.items)
        self._previous_filter = self._history[index - 2] if index > 1 else None
        self._current_filter = target
        self._next_filter = batch.next_filter
        return True

    def has_next(self) -> bool:
        """Check if there's a next page available."""
        return self._next_filter is not None

    def has_previous(self) -> bool:
        """Check if there's a previous page available."""
        return self.get_current_page_index() > 0

    def __aiter__(self) -> AsyncIterator[T]:
        """Iterate over every item from the current page onwards.

        The iteration advances the engine itself, so it cannot be restarted:
        a second ``async for`` continues from wherever the first one stopped.
        If a page fails to load the iteration ends early and the cause is
        left on ``last_error``.
        """
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[T]:
        while True:
            for item in list(self._items):
                yield item
            if not self.has_next():
                return
            if not await self.next():
                logger.warning(
                    "Iteration ended early: next page could not be fetched",
                    extra={
                        "chain": self.identity.chain,
                        "target": str(self.identity.target),
                        "page_index": self.get_current_page_index(),
                    },
                )
                return

    # ──────────────────────────────────────────────────────────────
    # State accessors
    # ──────────────────────────────────────────────────────────────

    def get_transactions(self) -> list[T]:
        """Get the current page of items."""
        return list(self._items or [])

    def get_current_filter(self) -> PageFilter:
        return self._current_filter

    def get_next_filter(self) -> PageFilter | None:
        return self._next_filter

    def get_previous_filter(self) -> PageFilter | None:
        return self._previous_filter

    def get_history(self) -> list[PageFilter]:
        """Get the navigation history, one filter per page visited."""
        return list(self._history)

    def get_filter_by_index(self, index: int) -> PageFilter | None:
        if 0 <= index < len(self._history):
            return self._history[index]
        return None

    def get_current_page_index(self) -> int:
        """Index of the current filter in the navigation history, or -1."""
        for index, page_filter in enumerate(self._history):
            if page_filter == self._current_filter:
                return index
        return -1

    @property
    def history_offset(self) -> int:
        return self._history_offset

    # ──────────────────────────────────────────────────────────────
    # Cursors
    # ──────────────────────────────────────────────────────────────

    def get_next_cursor(self) -> str | None:
        """Enhanced cursor for the next page, or None if there is no next page."""
        if self._next_filter is None:
            return None
        index = self.get_current_page_index()
        return self.codec.create_cursor(
            self._history,
            self._next_filter,
            index + 1,
            current_index=index,
            next_filter=self._next_filter,
            history_offset=self._history_offset,
        )

    def get_previous_cursor(self) -> str | None:
        """Enhanced cursor for the previous page, or None on the first page."""
        index = self.get_current_page_index()
        if index <= 0:
            return None
        return self.codec.create_cursor(
            self._history,
            self._history[index - 1],
            index - 1,
            current_index=index,
            next_filter=self._next_filter,
            history_offset=self._history_offset,
        )

    def get_current_cursor(self) -> str:
        """Enhanced cursor for the current page, to resume from it later."""
        index = max(self.get_current_page_index(), 0)
        return self.codec.create_cursor(
            self._history,
            self._current_filter,
            index,
            current_index=index,
            next_filter=self._next_filter,
            history_offset=self._history_offset,
        )

    def get_cursor_info(self) -> CursorInfo:
        """Get cursor information for external pagination systems."""
        return CursorInfo(
            has_next_page=self.has_next(),
            has_previous_page=self.has_previous(),
            next_cursor=self.get_next_cursor(),
            previous_cursor=self.get_previous_cursor(),
        )


__all__ = ["PageFetcher", "Pagination", "default_codec"]
