"""Pytest configuration and shared fixtures.

Organization:
    - Settings isolation: environment and cached loaders reset per test
    - Fetcher fixtures: scripted in-memory page fetchers
    - Transport fixtures: httpx.MockTransport routing for API clients
"""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from typing import Any

import httpx
import pytest

from translate_client.core.pagination import PageBatch, PageFilter, PageIdentity
from translate_client.core.settings import ClientSettings, clear_all_caches

SETTINGS_ENV_VARS = (
    "TRANSLATE_API_KEY",
    "TRANSLATE_BASE_URL",
    "TRANSLATE_TIMEOUT",
    "TRANSLATE_MAX_RETRIES",
    "PAGINATION_MAX_NAVIGATION_HISTORY",
    "PAGINATION_CURSOR_SIZE_WARNING_BYTES",
    "LOG_LEVEL",
    "LOG_JSON",
    "LOG_SERVICE_NAME",
)


# ============================================================================
# Settings isolation
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run every test against default settings, whatever the host environment says."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    clear_all_caches()
    yield
    clear_all_caches()


@pytest.fixture
def client_settings() -> ClientSettings:
    """Client settings with a test API key and a single attempt per request."""
    return ClientSettings(api_key="test-key", max_retries=1)


# ============================================================================
# Fetcher fixtures
# ============================================================================


class ScriptedFetcher:
    """In-memory page fetcher over a fixed list of pages.

    Page ``i`` is requested with ``filters[i]``; the first filter carries no
    page number and every later one carries ``page_number=i``. Indexes listed
    in ``failures`` raise ConnectionError when fetched.
    """

    def __init__(self, pages: Sequence[Sequence[Any]], page_size: int = 2, **filter_fields: Any):
        self.pages = [list(page) for page in pages]
        self.filters = [PageFilter(page_size=page_size, **filter_fields)] + [
            PageFilter(page_size=page_size, page_number=i, **filter_fields)
            for i in range(1, len(pages))
        ]
        self.calls: list[PageFilter] = []
        self.failures: set[int] = set()

    async def fetch(self, identity: PageIdentity, page_filter: PageFilter) -> PageBatch[Any]:
        self.calls.append(page_filter)
        index = self.filters.index(page_filter)
        if index in self.failures:
            raise ConnectionError(f"page {index} unavailable")
        next_filter = self.filters[index + 1] if index + 1 < len(self.filters) else None
        return PageBatch(items=list(self.pages[index]), next_filter=next_filter)


@pytest.fixture
def make_fetcher() -> Callable[..., ScriptedFetcher]:
    """Factory for scripted fetchers.

    Example:
        fetcher = make_fetcher([["A", "B"], ["C", "D"]])
    """
    return ScriptedFetcher


@pytest.fixture
def wallet() -> PageIdentity:
    return PageIdentity.wallet("eth", "0xabc")


# ============================================================================
# Transport fixtures
# ============================================================================


class RecordingTransport(httpx.MockTransport):
    """MockTransport answering from a path -> (status, payload) table.

    Paths are matched without the query string. A list of responses is
    served in order, repeating the last one. Every request is recorded.
    """

    def __init__(self, routes: dict[str, Any]):
        self.routes = routes
        self.requests: list[httpx.Request] = []
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path, (404, {"message": "Not Found"}))
        if isinstance(route, list):
            route = route.pop(0) if len(route) > 1 else route[0]
        status, payload = route
        if isinstance(payload, str):
            response = httpx.Response(status, text=payload)
        else:
            response = httpx.Response(status, content=json.dumps(payload).encode())
        # Serve the body as a stream so the client reads and closes it,
        # which is what sets ``response.elapsed``.
        return httpx.Response(
            status, headers=response.headers, stream=httpx.ByteStream(response.content)
        )


@pytest.fixture
def make_transport() -> Callable[[dict[str, Any]], RecordingTransport]:
    """Factory for recording mock transports."""
    return RecordingTransport
