"""Unit tests for the bidirectional pagination engine."""
from __future__ import annotations

import pytest

from translate_client.core.pagination import CursorCodec, PageFilter, TransactionsPage


async def open_page(fetcher, identity, codec=None):
    return await TransactionsPage.create(fetcher, identity, fetcher.filters[0], codec=codec)


# ──────────────────────────────────────────────────────────────
# Traversal
# ──────────────────────────────────────────────────────────────


@pytest.mark.unit
class TestTraversal:
    """Tests for next() and previous()."""

    @pytest.mark.asyncio
    async def test_two_page_walk(self, make_fetcher, wallet):
        """Walk forward to the end, bounce off it, and come back."""
        fetcher = make_fetcher([["A", "B"], ["C", "D"]])
        page = await open_page(fetcher, wallet)

        assert page.get_transactions() == ["A", "B"]
        assert page.has_next() is True

        assert await page.next() is True
        assert page.get_transactions() == ["C", "D"]
        assert page.has_next() is False

        assert await page.next() is False
        assert page.get_transactions() == ["C", "D"]

        assert await page.previous() is True
        assert page.get_transactions() == ["A", "B"]
        # initial fetch, next, previous re-fetch
        assert len(fetcher.calls) == 3

    @pytest.mark.asyncio
    async def test_terminal_forward_does_not_fetch(self, make_fetcher, wallet):
        fetcher = make_fetcher([["A"]])
        page = await open_page(fetcher, wallet)
        current = page.get_current_filter()

        assert await page.next() is False
        assert page.get_transactions() == ["A"]
        assert page.get_current_filter() == current
        assert len(fetcher.calls) == 1

    @pytest.mark.asyncio
    async def test_previous_on_first_page_is_noop(self, make_fetcher, wallet):
        """previous() on the first page returns False without fetching."""
        fetcher = make_fetcher([["A", "B"], ["C"]])
        page = await open_page(fetcher, wallet)

        assert page.has_previous() is False
        assert await page.previous() is False
        assert len(fetcher.calls) == 1

    @pytest.mark.asyncio
    async def test_next_then_previous_restores_first_page(self, make_fetcher, wallet):
        fetcher = make_fetcher([["A", "B"], ["C", "D"], ["E"]])
        page = await open_page(fetcher, wallet)

        await page.next()
        await page.previous()

        assert page.get_transactions() == ["A", "B"]
        assert page.get_current_filter() == fetcher.filters[0]
        assert page.get_next_filter() == fetcher.filters[1]
        assert page.get_previous_filter() is None

    @pytest.mark.asyncio
    async def test_history_records_each_page_once(self, make_fetcher, wallet):
        """Moving forward over an already visited page reuses its history entry."""
        fetcher = make_fetcher([["A"], ["B"], ["C"]])
        page = await open_page(fetcher, wallet)

        await page.next()
        await page.next()
        await page.previous()
        await page.next()

        assert page.get_history() == fetcher.filters
        assert page.get_current_page_index() == 2

    @pytest.mark.asyncio
    async def test_previous_filter_tracks_position(self, make_fetcher, wallet):
        fetcher = make_fetcher([["A"], ["B"], ["C"]])
        page = await open_page(fetcher, wallet)

        await page.next()
        await page.next()
        assert page.get_previous_filter() == fetcher.filters[1]

        await page.previous()
        assert page.get_previous_filter() == fetcher.filters[0]

    @pytest.mark.asyncio
    async def test_get_transactions_returns_copy(self, make_fetcher, wallet):
        fetcher = make_fetcher([["A", "B"]])
        page = await open_page(fetcher, wallet)

        page.get_transactions().append("Z")

        assert page.get_transactions() == ["A", "B"]

    @pytest.mark.asyncio
    async def test_get_filter_by_index(self, make_fetcher, wallet):
        fetcher = make_fetcher([["A"], ["B"]])
        page = await open_page(fetcher, wallet)
        await page.next()

        assert page.get_filter_by_index(1) == fetcher.filters[1]
        assert page.get_filter_by_index(2) is None
        assert page.get_filter_by_index(-1) is None


@pytest.mark.unit
class TestFetchFailures:
    """A failed fetch leaves the engine exactly as it was."""

    @pytest.mark.asyncio
    async def test_failed_next_keeps_state(self, make_fetcher, wallet):
        fetcher = make_fetcher([["A", "B"], ["C", "D"]])
        page = await open_page(fetcher, wallet)
        fetcher.failures.add(1)

        assert await page.next() is False

        assert page.get_transactions() == ["A", "B"]
        assert page.get_current_filter() == fetcher.filters[0]
        assert page.get_next_filter() == fetcher.filters[1]
        assert page.get_history() == [fetcher.filters[0]]
        assert isinstance(page.last_error, ConnectionError)

    @pytest.mark.asyncio
    async def test_failed_previous_keeps_state(self, make_fetcher, wallet):
        fetcher = make_fetcher([["A"], ["B"]])
        page = await open_page(fetcher, wallet)
        await page.next()
        fetcher.failures.add(0)

        assert await page.previous() is False

        assert page.get_transactions() == ["B"]
        assert page.get_current_page_index() == 1
        assert page.last_error is not None

    @pytest.mark.asyncio
    async def test_successful_call_clears_last_error(self, make_fetcher, wallet):
        fetcher = make_fetcher([["A"], ["B"]])
        page = await open_page(fetcher, wallet)
        fetcher.failures.add(1)
        await page.next()

        fetcher.failures.clear()
        assert await page.next() is True
        assert page.last_error is None

    @pytest.mark.asyncio
    async def test_failure_is_logged(self, make_fetcher, wallet, caplog):
        fetcher = make_fetcher([["A"], ["B"]])
        page = await open_page(fetcher, wallet)
        fetcher.failures.add(1)

        with caplog.at_level("WARNING", logger="translate_client.core.pagination.engine"):
            await page.next()

        assert "Failed to fetch next page for eth/0xabc" in caplog.text


# ──────────────────────────────────────────────────────────────
# Iteration
# ──────────────────────────────────────────────────────────────


@pytest.mark.unit
class TestIteration:
    """Tests for async iteration over items."""

    @pytest.mark.asyncio
    async def test_iteration_yields_every_item_in_order(self, make_fetcher, wallet):
        pages = [["a", "b"], ["c", "d"], ["e", "f"], ["g"]]
        fetcher = make_fetcher(pages)
        page = await open_page(fetcher, wallet)

        items = [item async for item in page]

        assert items == ["a", "b", "c", "d", "e", "f", "g"]
        assert page.has_next() is False

    @pytest.mark.asyncio
    async def test_iteration_stops_on_fetch_failure(self, make_fetcher, wallet):
        """A failing page ends the iteration early and leaves the cause on last_error."""
        fetcher = make_fetcher([["a", "b"], ["c"], ["d"]])
        fetcher.failures.add(2)
        page = await open_page(fetcher, wallet)

        items = [item async for item in page]

        assert items == ["a", "b", "c"]
        assert isinstance(page.last_error, ConnectionError)
        assert page.get_current_page_index() == 1

    @pytest.mark.asyncio
    async def test_iteration_of_empty_collection(self, make_fetcher, wallet):
        fetcher = make_fetcher([[]])
        page = await open_page(fetcher, wallet)

        assert [item async for item in page] == []


# ──────────────────────────────────────────────────────────────
# Cursors
# ──────────────────────────────────────────────────────────────


@pytest.mark.unit
class TestCursorExport:
    """Tests for cursors exported by the engine."""

    @pytest.mark.asyncio
    async def test_cursor_info_on_first_page(self, make_fetcher, wallet):
        fetcher = make_fetcher([["A"], ["B"]])
        page = await open_page(fetcher, wallet)

        info = page.get_cursor_info()

        assert info.has_next_page is True
        assert info.has_previous_page is False
        assert info.next_cursor is not None
        assert info.previous_cursor is None
        assert set(info.model_dump(by_alias=True)) == {
            "hasNextPage",
            "hasPreviousPage",
            "nextCursor",
            "previousCursor",
        }

    @pytest.mark.asyncio
    async def test_no_next_cursor_on_last_page(self, make_fetcher, wallet):
        fetcher = make_fetcher([["A"]])
        page = await open_page(fetcher, wallet)

        assert page.get_next_cursor() is None

    @pytest.mark.asyncio
    async def test_next_cursor_targets_next_filter(self, make_fetcher, wallet):
        fetcher = make_fetcher([["A"], ["B"], ["C"]])
        page = await open_page(fetcher, wallet)

        decoded = page.decode_cursor(page.get_next_cursor())

        assert page.is_enhanced_cursor(decoded)
        assert PageFilter.from_wire(decoded) == fetcher.filters[1]
        assert decoded["_cursorMeta"]["currentPageIndex"] == 1
        assert decoded["_cursorMeta"]["canGoBack"] is True
        assert decoded["_cursorMeta"]["previousPageOptions"] == fetcher.filters[0].to_wire()

    @pytest.mark.asyncio
    async def test_previous_cursor_targets_previous_page(self, make_fetcher, wallet):
        fetcher = make_fetcher([["A"], ["B"], ["C"]])
        page = await open_page(fetcher, wallet)
        await page.next()
        await page.next()

        decoded = page.decode_cursor(page.get_previous_cursor())

        assert PageFilter.from_wire(decoded) == fetcher.filters[1]
        assert decoded["_cursorMeta"]["nextPageOptions"] == fetcher.filters[2].to_wire()
        assert decoded["_cursorMeta"]["originalPageIndex"] == 1

    @pytest.mark.asyncio
    async def test_single_page_history_bound(self, make_fetcher, wallet):
        """With maxNavigationHistory=1 the next cursor for page 5 embeds only page 5."""
        fetcher = make_fetcher([[i] for i in range(7)], max_navigation_history=1)
        page = await open_page(fetcher, wallet)
        for _ in range(4):
            assert await page.next() is True

        meta = page.decode_cursor(page.get_next_cursor())["_cursorMeta"]

        assert meta["navigationHistory"] == [fetcher.filters[5].to_wire()]
        assert meta["currentPageIndex"] == 0
        assert meta["historyStartIndex"] == 5
        assert meta["originalPageIndex"] == 5

    @pytest.mark.asyncio
    async def test_oversize_cursor_goes_to_sink(self, make_fetcher, wallet):
        diagnostics = []
        codec = CursorCodec(size_warning_bytes=32, on_diagnostic=diagnostics.append)
        fetcher = make_fetcher([["A"], ["B"]])
        page = await open_page(fetcher, wallet, codec=codec)

        page.get_next_cursor()

        assert len(diagnostics) == 1
        assert diagnostics[0].size_bytes > 32

    @pytest.mark.asyncio
    async def test_codec_default_from_settings(self, make_fetcher, wallet, monkeypatch):
        monkeypatch.setenv("PAGINATION_MAX_NAVIGATION_HISTORY", "2")
        fetcher = make_fetcher([["A"], ["B"], ["C"], ["D"]])
        page = await open_page(fetcher, wallet)
        await page.next()
        await page.next()

        meta = page.decode_cursor(page.get_next_cursor())["_cursorMeta"]

        assert len(meta["navigationHistory"]) == 2
        assert meta["historyStartIndex"] == 2
