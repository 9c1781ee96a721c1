"""Query-string form of page filters.

Outbound requests carry the filter as query parameters; the API answers with
a ``nextPageUrl`` whose query parameters describe the following page.
"""

from __future__ import annotations

import httpx

from translate_client.core.pagination.filters import QUERY_KEY_OVERRIDES, PageFilter

DEFAULT_BASE_URL = "https://translate.noves.fi"

# Query keys read back from a nextPageUrl, mapped to their wire names.
NEXT_PAGE_KEYS: dict[str, str] = {
    "startBlock": "startBlock",
    "endBlock": "endBlock",
    "startTimestamp": "startTimestamp",
    "endTimestamp": "endTimestamp",
    "sort": "sort",
    "viewAsAccountAddress": "viewAsAccountAddress",
    "pageSize": "pageSize",
    "liveData": "liveData",
    "viewAsTransactionSender": "viewAsTransactionSender",
    "v5Format": "v5Format",
    "numberOfEpochs": "numberOfEpochs",
    "includePrices": "includePrices",
    "excludeZeroPrices": "excludeZeroPrices",
    "ignoreTransactions": "ignoreTransactions",
    "pageKey": "pageKey",
    "marker": "marker",
    "ascending": "ascending",
    **{query: wire for wire, query in QUERY_KEY_OVERRIDES.items()},
}


def construct_url(endpoint: str, page_filter: PageFilter | None = None) -> str:
    """Append a filter's query parameters to an endpoint path.

    Example:
        construct_url("eth/txs/0xabc", PageFilter(page_size=10))
        # "eth/txs/0xabc?sort=desc&pageSize=10"
    """
    if page_filter is None:
        return endpoint
    params = page_filter.query_params()
    if not params:
        return endpoint
    return f"{endpoint}?{httpx.QueryParams(params)}"


def parse_url(url: str, base_url: str = DEFAULT_BASE_URL) -> PageFilter:
    """Read the filter for the next page out of a ``nextPageUrl``.

    Relative URLs are resolved against ``base_url``. Unknown query
    parameters are ignored; values are coerced by PageFilter validation.

    Raises:
        pydantic.ValidationError: If a recognized parameter has an invalid value.
    """
    full_url = httpx.URL(url) if url.startswith("http") else httpx.URL(base_url).join(url)
    wire = {
        NEXT_PAGE_KEYS[key]: value
        for key, value in full_url.params.multi_items()
        if key in NEXT_PAGE_KEYS
    }
    return PageFilter.from_wire(wire)


__all__ = ["DEFAULT_BASE_URL", "construct_url", "parse_url"]
