"""Cursor-based pagination over server-driven page fetches.

This package turns a sequence of one-way page fetches into a bidirectional,
resumable navigation abstraction:

    page = await TransactionsPage.create(fetcher, PageIdentity.wallet("eth", addr))
    await page.next()
    await page.previous()

    cursor = page.get_next_cursor()          # opaque, self-contained token
    resumed = await TransactionsPage.from_cursor(fetcher, identity, cursor)

Cursors are Base64 encoded JSON: the target page's filter, plus navigation
metadata under ``_cursorMeta`` for enhanced cursors.
"""

from translate_client.core.pagination.cursor import (
    Cursor,
    CursorCodec,
    CursorDiagnostic,
    CursorNavigationMeta,
    EnhancedCursor,
    LegacyCursor,
)
from translate_client.core.pagination.engine import PageFetcher, Pagination
from translate_client.core.pagination.filters import PageFilter
from translate_client.core.pagination.pages import HistoryPage, TransactionsPage
from translate_client.core.pagination.schemas import CursorInfo, PageBatch, PageIdentity

__all__ = [
    # Cursor utilities
    "Cursor",
    "CursorCodec",
    "CursorDiagnostic",
    "CursorInfo",
    "CursorNavigationMeta",
    "EnhancedCursor",
    "LegacyCursor",
    # Engine and adapters
    "HistoryPage",
    "PageBatch",
    "PageFetcher",
    "PageFilter",
    "PageIdentity",
    "Pagination",
    "TransactionsPage",
]
