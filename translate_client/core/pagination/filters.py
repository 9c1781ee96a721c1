"""Page filter describing one page request.

A PageFilter is the query for a single page: block/time range, sort order,
page size and per-ecosystem format flags. It is immutable and compared
structurally, which is how the pagination engine locates a page in its
navigation history.

Wire form:
    Filters travel inside cursors and query strings under their camelCase
    names, with unset fields omitted:

        {"startBlock": 18500000, "sort": "desc", "pageSize": 25}
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

SortOrder = Literal["asc", "desc"]

# Never sent to the API; only meaningful to the client.
CLIENT_ONLY_FIELDS = frozenset({"maxNavigationHistory"})

# Flags the API does not echo back in nextPageUrl but which must persist
# across pages of one traversal.
STICKY_FIELDS = ("max_navigation_history", "v5_format")

# Wire names that use a different query-string key.
QUERY_KEY_OVERRIDES = {"pageNumber": "page"}


class PageFilter(BaseModel):
    """Immutable description of the slice of a collection to fetch.

    Attributes:
        start_block: First block number to include.
        end_block: Last block number to include.
        start_timestamp: Lower time bound in milliseconds.
        end_timestamp: Upper time bound in milliseconds.
        sort: "desc" (default) or "asc".
        view_as_account_address: Account perspective for classification.
        page_size: Items per page; ecosystem maximums apply server side.
        live_data: EVM only, read live data instead of indexed history.
        view_as_transaction_sender: EVM only.
        v5_format: EVM only, select the v5 transaction schema.
        number_of_epochs: SVM staking only.
        include_prices: Include token prices.
        exclude_zero_prices: Skip tokens without a price.
        ignore_transactions: Server issued cursor token (set from nextPageUrl).
        page_key: TVM page cursor (set from nextPageUrl).
        marker: XRPL ledger marker (set from nextPageSettings).
        page_number: Offset page number for job based pagination.
        ascending: Sort flag for job based pagination.
        max_navigation_history: Override for the history bound embedded in
            exported cursors.
    """

    start_block: int | None = Field(default=None, alias="startBlock")
    end_block: int | None = Field(default=None, alias="endBlock")
    start_timestamp: int | None = Field(default=None, alias="startTimestamp")
    end_timestamp: int | None = Field(default=None, alias="endTimestamp")
    sort: SortOrder = Field(default="desc", alias="sort")
    view_as_account_address: str | None = Field(default=None, alias="viewAsAccountAddress")
    page_size: int | None = Field(default=None, ge=1, alias="pageSize")
    live_data: bool | None = Field(default=None, alias="liveData")
    view_as_transaction_sender: bool | None = Field(
        default=None, alias="viewAsTransactionSender"
    )
    v5_format: bool | None = Field(default=None, alias="v5Format")
    number_of_epochs: int | None = Field(default=None, alias="numberOfEpochs")
    include_prices: bool | None = Field(default=None, alias="includePrices")
    exclude_zero_prices: bool | None = Field(default=None, alias="excludeZeroPrices")
    ignore_transactions: str | None = Field(default=None, alias="ignoreTransactions")
    page_key: str | None = Field(default=None, alias="pageKey")
    marker: str | None = Field(default=None, alias="marker")
    page_number: int | None = Field(default=None, alias="pageNumber")
    ascending: bool | None = Field(default=None, alias="ascending")
    max_navigation_history: int | None = Field(default=None, alias="maxNavigationHistory")

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PageFilter):
            return NotImplemented
        return self.to_wire() == other.to_wire()

    def __hash__(self) -> int:
        return hash(tuple(self.to_wire().items()))

    @classmethod
    def from_wire(cls, data: Mapping[str, Any]) -> PageFilter:
        """Build a filter from its camelCase wire mapping.

        Keys that are not filter fields (such as ``_cursorMeta``) are ignored.

        Raises:
            pydantic.ValidationError: If a field has an invalid value.
        """
        return cls.model_validate(dict(data))

    def to_wire(self) -> dict[str, Any]:
        """Dump to the camelCase wire mapping, omitting unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def query_params(self) -> dict[str, str]:
        """Outbound query-string parameters for this filter.

        Client-only fields are dropped and booleans are lower-cased to match
        what the API expects.
        """
        params: dict[str, str] = {}
        for key, value in self.to_wire().items():
            if key in CLIENT_ONLY_FIELDS:
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            params[QUERY_KEY_OVERRIDES.get(key, key)] = str(value)
        return params

    def with_sticky_fields(self, source: PageFilter) -> PageFilter:
        """Copy client-side flags from ``source`` that the API does not echo back."""
        updates = {
            name: getattr(source, name)
            for name in STICKY_FIELDS
            if getattr(self, name) is None and getattr(source, name) is not None
        }
        if not updates:
            return self
        return self.model_copy(update=updates)

    def effective_max_history(self, default: int) -> int:
        """History bound for cursors built from this filter."""
        if self.max_navigation_history is not None and self.max_navigation_history > 0:
            return self.max_navigation_history
        return default


__all__ = ["CLIENT_ONLY_FIELDS", "PageFilter", "SortOrder"]
