"""Shared plumbing for the per-ecosystem Translate clients.

Most ecosystems answer paged endpoints with the same envelope:

    {"items": [...], "hasNextPage": true, "nextPageUrl": "/evm/eth/txs/0x..?pageSize=10&..."}

``fetch_page`` maps that envelope into a PageBatch (clients with a different
envelope override ``page_envelope_fields`` and ``read_next_filter``); ``EndpointFetcher``
binds it to a path template so the pagination engine can page over any
endpoint without knowing which ecosystem it talks to.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Generic, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from translate_client.core.exceptions import ChainNotFoundError, ResponseValidationError
from translate_client.core.models import Chain, Transaction
from translate_client.core.pagination import (
    PageBatch,
    PageFilter,
    PageIdentity,
    TransactionsPage,
)
from translate_client.core.settings import ClientSettings, get_client_settings
from translate_client.infra.external.base_client import BaseHTTPClient
from translate_client.infra.external.urls import construct_url, parse_url

logger = logging.getLogger(__name__)

T = TypeVar("T")
PageT = TypeVar("PageT", bound=TransactionsPage)

PAGE_ENVELOPE_FIELDS = ["items", "hasNextPage"]


class BaseTranslateClient(BaseHTTPClient):
    """Base class for all ecosystem clients.

    Subclasses set ``ecosystem``; requests go to ``{base_url}/{ecosystem}/...``
    with the API key in the ``apiKey`` header.
    """

    ecosystem: ClassVar[str]
    transactions_path: ClassVar[str] = "{chain}/txs/{target}"
    page_envelope_fields: ClassVar[list[str]] = PAGE_ENVELOPE_FIELDS

    def __init__(
        self,
        api_key: str | None = None,
        *,
        settings: ClientSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: API key; falls back to ``TRANSLATE_API_KEY``.
            settings: Client settings; defaults to the cached settings.
            transport: Optional httpx transport (tests).

        Raises:
            ValueError: If no API key is available.
        """
        settings = settings or get_client_settings()
        key = api_key or (settings.api_key.get_secret_value() if settings.api_key else None)
        if not key:
            raise ValueError("API key is required")

        self.service_url = settings.base_url
        super().__init__(
            base_url=f"{settings.base_url}/{self.ecosystem}",
            timeout=settings.timeout,
            max_retries=settings.max_retries,
            headers={"apiKey": key},
            transport=transport,
        )

    @staticmethod
    def validate_response(
        payload: Any, required_fields: list[str], endpoint: str | None = None
    ) -> dict[str, Any]:
        """Check that a response carries the required fields.

        Raises:
            ResponseValidationError: If the payload is not an object or a field is missing.
        """
        if not isinstance(payload, dict):
            raise ResponseValidationError(required_fields, endpoint)
        missing = [field for field in required_fields if field not in payload]
        if missing:
            raise ResponseValidationError(missing, endpoint)
        return payload

    def normalize_chain(self, chain: str) -> str:
        return chain.lower()

    async def get_chains(self) -> list[Chain]:
        """List the chains supported by this ecosystem."""
        payload = await self.get("chains")
        if not isinstance(payload, list):
            raise ResponseValidationError(["chains"], "chains")
        return [Chain.model_validate(item) for item in payload]

    async def get_chain(self, name: str) -> Chain:
        """Look up one supported chain by name.

        Raises:
            ChainNotFoundError: If the ecosystem does not support the chain.
        """
        wanted = self.normalize_chain(name)
        for chain in await self.get_chains():
            if chain.name.lower() == wanted:
                return chain
        raise ChainNotFoundError(name)

    async def get_transaction(self, chain: str, tx_hash: str) -> dict[str, Any]:
        """Get one classified transaction by hash or signature."""
        return await self.get(f"{self.normalize_chain(chain)}/tx/{tx_hash}")

    async def fetch_page(
        self,
        path: str,
        page_filter: PageFilter,
        item_model: type[BaseModel] | None = None,
    ) -> PageBatch[Any]:
        """Fetch one page of a paged endpoint.

        Client-side flags the API does not echo back in ``nextPageUrl``
        (``maxNavigationHistory``, ``v5Format``) are carried into the next filter.

        Raises:
            TransactionError: On an API error response.
            ResponseValidationError: If the page envelope is incomplete, an
                item does not match ``item_model`` or the next page link
                carries invalid filter values.
        """
        payload = self.validate_response(
            await self.get(construct_url(path, page_filter)), self.page_envelope_fields, path
        )

        items = payload.get("items") or []
        if not isinstance(items, list):
            raise ResponseValidationError(["items"], path)
        if item_model is not None:
            try:
                items = [item_model.model_validate(item) for item in items]
            except ValidationError as e:
                raise ResponseValidationError(["items"], path) from e

        try:
            next_filter = self.read_next_filter(payload, page_filter)
        except ValidationError as e:
            raise ResponseValidationError(["nextPageUrl"], path) from e

        logger.debug(
            f"Fetched {len(items)} items from {self.ecosystem}/{path}",
            extra={
                "ecosystem": self.ecosystem,
                "path": path,
                "item_count": len(items),
                "has_next_page": next_filter is not None,
            },
        )
        return PageBatch(items=list(items), next_filter=next_filter)

    def read_next_filter(self, payload: dict[str, Any], page_filter: PageFilter) -> PageFilter | None:
        """Filter for the page after ``page_filter``, or None on the last page.

        Raises:
            pydantic.ValidationError: If ``nextPageUrl`` carries invalid values.
        """
        next_url = payload.get("nextPageUrl")
        if not (payload["hasNextPage"] and next_url):
            return None
        return parse_url(next_url, self.service_url).with_sticky_fields(page_filter)

    async def transactions(
        self, chain: str, address: str, page_filter: PageFilter | None = None
    ) -> TransactionsPage[Transaction]:
        """First page of an account's classified transactions."""
        return await self.paginate(
            TransactionsPage,
            self.transactions_path,
            PageIdentity.wallet(chain, address),
            page_filter,
            Transaction,
        )

    async def transactions_from_cursor(
        self, chain: str, address: str, cursor: str
    ) -> TransactionsPage[Transaction]:
        """Resume an account's transactions from an exported cursor."""
        return await self.resume(
            TransactionsPage,
            self.transactions_path,
            PageIdentity.wallet(chain, address),
            cursor,
            Transaction,
        )

    def fetcher(self, path_template: str, item_model: type[BaseModel] | None = None) -> EndpointFetcher:
        """Build a page fetcher for a path template such as ``"{chain}/txs/{target}"``."""
        return EndpointFetcher(self, path_template, item_model)

    async def paginate(
        self,
        page_cls: type[PageT],
        path_template: str,
        identity: PageIdentity,
        page_filter: PageFilter | None = None,
        item_model: type[BaseModel] | None = None,
    ) -> PageT:
        """Fetch the first page of an endpoint and wrap it in a page adapter."""
        identity = PageIdentity(
            chain=self.normalize_chain(identity.chain),
            target=identity.target,
            kind=identity.kind,
        )
        return await page_cls.create(
            self.fetcher(path_template, item_model), identity, page_filter or PageFilter()
        )

    async def resume(
        self,
        page_cls: type[PageT],
        path_template: str,
        identity: PageIdentity,
        cursor: str,
        item_model: type[BaseModel] | None = None,
    ) -> PageT:
        """Resume paging an endpoint from an exported cursor."""
        identity = PageIdentity(
            chain=self.normalize_chain(identity.chain),
            target=identity.target,
            kind=identity.kind,
        )
        return await page_cls.from_cursor(self.fetcher(path_template, item_model), identity, cursor)


class EndpointFetcher(Generic[T]):
    """Page fetcher for one endpoint of one ecosystem client."""

    def __init__(
        self,
        client: BaseTranslateClient,
        path_template: str,
        item_model: type[BaseModel] | None = None,
    ) -> None:
        self.client = client
        self.path_template = path_template
        self.item_model = item_model

    def path_for(self, identity: PageIdentity) -> str:
        return self.path_template.format(chain=identity.chain, target=identity.target)

    async def fetch(self, identity: PageIdentity, page_filter: PageFilter) -> PageBatch[T]:
        return await self.client.fetch_page(self.path_for(identity), page_filter, self.item_model)


__all__ = ["BaseTranslateClient", "EndpointFetcher"]
