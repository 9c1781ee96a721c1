"""Async client for the Translate API with cursor-based, bidirectional pagination."""

from translate_client.core.exceptions import (
    ChainNotFoundError,
    ErrorType,
    InvalidCursorError,
    ResponseValidationError,
    TransactionError,
    TranslateClientError,
)
from translate_client.core.pagination import (
    CursorCodec,
    CursorInfo,
    HistoryPage,
    PageBatch,
    PageFetcher,
    PageFilter,
    PageIdentity,
    Pagination,
    TransactionsPage,
)
from translate_client.infra.external.translate import (
    TranslateCOSMOS,
    TranslateEVM,
    TranslatePOLKADOT,
    TranslateSVM,
    TranslateTVM,
    TranslateUTXO,
    TranslateXRPL,
)

__version__ = "0.1.0"

__all__ = [
    "ChainNotFoundError",
    "CursorCodec",
    "CursorInfo",
    "ErrorType",
    "HistoryPage",
    "InvalidCursorError",
    "PageBatch",
    "PageFetcher",
    "PageFilter",
    "PageIdentity",
    "Pagination",
    "ResponseValidationError",
    "TransactionError",
    "TranslateCOSMOS",
    "TranslateClientError",
    "TranslateEVM",
    "TranslatePOLKADOT",
    "TranslateSVM",
    "TranslateTVM",
    "TranslateUTXO",
    "TranslateXRPL",
]
