"""Cursor encoding and decoding for pagination.

Cursors are opaque strings that let a caller resume a traversal later, or
hand the position to an external pagination system, without any server-side
session state: the cursor is the only state.

The cursor format is:
1. The target page's filter fields (camelCase, unset fields omitted)
2. Optionally merged with navigation metadata under ``_cursorMeta``
3. Serialized as compact UTF-8 JSON
4. Base64 encoded (standard alphabet, padded)

Two generations of cursor exist:
    Legacy:   {"sort": "desc", "pageSize": 10}
    Enhanced: {"sort": "desc", "pageSize": 10, "_cursorMeta": {...}}

Enhanced cursors embed a bounded slice of the navigation history (the most
recent ``maxNavigationHistory`` pages, 10 by default) so that a consumer can
rebuild recent back-navigation while keeping the token short enough for query
strings and headers.
"""

from __future__ import annotations

import base64
import json
import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from translate_client.core.exceptions import InvalidCursorError
from translate_client.core.pagination.filters import PageFilter

logger = logging.getLogger(__name__)

META_KEY = "_cursorMeta"
DEFAULT_MAX_NAVIGATION_HISTORY = 10
DEFAULT_SIZE_WARNING_BYTES = 5 * 1024

# Cursors copied out of URLs may use the URL-safe alphabet without padding.
URLSAFE_ALPHABET = str.maketrans("-_", "+/")


class CursorNavigationMeta(BaseModel):
    """Navigation metadata embedded in an enhanced cursor.

    Attributes:
        current_page_index: Position of the target page within the embedded
            (possibly truncated) history.
        navigation_history: Bounded slice of the history, oldest dropped first.
        can_go_back: Whether a page exists before the target page.
        can_go_forward: Whether a page exists after the target page.
        previous_page_options: Filter of the page before the target.
        next_page_options: Filter of the page after the target, if known.
        original_page_index: Untruncated index of the target page.
        history_start_index: Offset of the embedded slice into the full history.
    """

    current_page_index: int = Field(alias="currentPageIndex", ge=0)
    navigation_history: list[PageFilter] = Field(alias="navigationHistory")
    can_go_back: bool = Field(alias="canGoBack")
    can_go_forward: bool = Field(alias="canGoForward")
    previous_page_options: PageFilter | None = Field(default=None, alias="previousPageOptions")
    next_page_options: PageFilter | None = Field(default=None, alias="nextPageOptions")
    original_page_index: int | None = Field(default=None, alias="originalPageIndex")
    history_start_index: int | None = Field(default=None, alias="historyStartIndex")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    def to_wire(self) -> dict[str, Any]:
        """Dump in wire order with nested filters in their wire form."""
        data: dict[str, Any] = {
            "currentPageIndex": self.current_page_index,
            "navigationHistory": [f.to_wire() for f in self.navigation_history],
            "canGoBack": self.can_go_back,
            "canGoForward": self.can_go_forward,
            "previousPageOptions": (
                self.previous_page_options.to_wire() if self.previous_page_options else None
            ),
            "nextPageOptions": (
                self.next_page_options.to_wire() if self.next_page_options else None
            ),
        }
        if self.original_page_index is not None:
            data["originalPageIndex"] = self.original_page_index
        if self.history_start_index is not None:
            data["historyStartIndex"] = self.history_start_index
        return data

    @property
    def absolute_page_index(self) -> int:
        """Index of the target page in the untruncated history."""
        if self.original_page_index is not None:
            return self.original_page_index
        return (self.history_start_index or 0) + self.current_page_index


@dataclass(frozen=True)
class LegacyCursor:
    """A bare filter cursor without navigation metadata."""

    page_filter: PageFilter


@dataclass(frozen=True)
class EnhancedCursor:
    """A filter cursor carrying navigation metadata."""

    page_filter: PageFilter
    meta: CursorNavigationMeta

    def to_wire(self) -> dict[str, Any]:
        return {**self.page_filter.to_wire(), META_KEY: self.meta.to_wire()}


Cursor = LegacyCursor | EnhancedCursor


@dataclass(frozen=True)
class CursorDiagnostic:
    """Non-fatal report about an exported cursor."""

    size_bytes: int
    threshold_bytes: int
    history_length: int
    message: str


DiagnosticSink = Callable[[CursorDiagnostic], None]


def log_cursor_diagnostic(diagnostic: CursorDiagnostic) -> None:
    """Default diagnostic sink: emit a logging warning."""
    logger.warning(
        diagnostic.message,
        extra={
            "cursor_size_bytes": diagnostic.size_bytes,
            "threshold_bytes": diagnostic.threshold_bytes,
            "history_length": diagnostic.history_length,
        },
    )


class CursorCodec:
    """Encode and decode pagination cursors.

    Usage:
        codec = CursorCodec(default_max_history=10)

        # Encoding (normally done by the pagination engine)
        token = codec.create_cursor(
            history, next_filter, target_index=3, current_index=2, next_filter=None
        )

        # Decoding
        decoded = CursorCodec.decode(token)
        if CursorCodec.is_enhanced(decoded):
            print(decoded["_cursorMeta"]["currentPageIndex"])

        # Or as a tagged variant
        match CursorCodec.parse(token):
            case EnhancedCursor(page_filter=f, meta=meta):
                ...
            case LegacyCursor(page_filter=f):
                ...
    """

    def __init__(
        self,
        default_max_history: int = DEFAULT_MAX_NAVIGATION_HISTORY,
        size_warning_bytes: int = DEFAULT_SIZE_WARNING_BYTES,
        on_diagnostic: DiagnosticSink | None = None,
    ) -> None:
        """Initialize the codec.

        Args:
            default_max_history: History bound used when the target filter
                does not carry a positive ``maxNavigationHistory``.
            size_warning_bytes: Encoded size above which a diagnostic is emitted.
            on_diagnostic: Sink for diagnostics; defaults to a logging warning.
        """
        self.default_max_history = default_max_history
        self.size_warning_bytes = size_warning_bytes
        self.on_diagnostic = on_diagnostic or log_cursor_diagnostic

    @staticmethod
    def encode(data: Mapping[str, Any]) -> str:
        """Encode a cursor mapping to an opaque string.

        Args:
            data: Filter fields, optionally with ``_cursorMeta``.

        Returns:
            Base64 encoded compact JSON.
        """
        json_str = json.dumps(dict(data), separators=(",", ":"), ensure_ascii=False)
        return base64.b64encode(json_str.encode("utf-8")).decode("ascii")

    @staticmethod
    def decode(cursor: str) -> dict[str, Any]:
        """Decode a cursor string to its JSON object.

        Args:
            cursor: Base64 encoded cursor string. The URL-safe alphabet and
                missing padding are accepted.

        Returns:
            The decoded mapping (legacy or enhanced shape).

        Raises:
            InvalidCursorError: If the cursor is not Base64, not JSON, or not
                a JSON object.
        """
        try:
            token = cursor.strip().translate(URLSAFE_ALPHABET)
            token += "=" * (-len(token) % 4)
            raw = base64.b64decode(token.encode("ascii"), validate=True)
            payload = json.loads(raw.decode("utf-8"))
        except (AttributeError, ValueError) as e:
            raise InvalidCursorError(str(e) or type(e).__name__) from e

        if not isinstance(payload, dict):
            raise InvalidCursorError("cursor payload is not an object")
        return payload

    @staticmethod
    def is_enhanced(decoded: Any) -> bool:
        """Check if a decoded cursor carries navigation metadata."""
        return isinstance(decoded, Mapping) and META_KEY in decoded

    @classmethod
    def parse(cls, cursor: str) -> Cursor:
        """Decode and validate a cursor into a LegacyCursor or EnhancedCursor.

        Raises:
            InvalidCursorError: If decoding fails or the fields are invalid.
        """
        decoded = cls.decode(cursor)
        try:
            page_filter = PageFilter.from_wire(decoded)
            if cls.is_enhanced(decoded):
                meta = CursorNavigationMeta.model_validate(decoded[META_KEY])
                return EnhancedCursor(page_filter=page_filter, meta=meta)
            return LegacyCursor(page_filter=page_filter)
        except ValidationError as e:
            raise InvalidCursorError(f"invalid cursor fields: {e.error_count()} error(s)") from e

    def build_metadata(
        self,
        history: Sequence[PageFilter],
        target_filter: PageFilter,
        target_index: int,
        *,
        current_index: int,
        next_filter: PageFilter | None,
        history_offset: int = 0,
    ) -> CursorNavigationMeta:
        """Build navigation metadata for the page at ``target_index``.

        The target may be one position past the end of ``history`` (a
        forward-looking cursor for a page not fetched yet); it is then
        appended to the embedded slice.

        ``history_offset`` is the number of pages that precede ``history[0]``
        in the true traversal (non-zero for an engine resumed from a truncated
        cursor); it is added to ``originalPageIndex`` and ``historyStartIndex``.
        """
        if target_index < 0 or target_index > len(history):
            raise ValueError(
                f"target_index {target_index} outside navigation history of {len(history)}"
            )

        max_history = target_filter.effective_max_history(self.default_max_history)
        start_index = max(0, target_index + 1 - max_history)

        embedded = list(history[start_index : target_index + 1])
        if len(history) <= target_index:
            embedded.append(target_filter)

        if target_index == current_index:
            next_options = next_filter
        elif target_index < len(history) - 1:
            next_options = history[target_index + 1]
        else:
            next_options = None

        return CursorNavigationMeta(
            current_page_index=target_index - start_index,
            navigation_history=embedded,
            can_go_back=target_index > 0,
            can_go_forward=target_index < len(history) - 1 or next_filter is not None,
            previous_page_options=history[target_index - 1] if target_index > 0 else None,
            next_page_options=next_options,
            original_page_index=history_offset + target_index,
            history_start_index=history_offset + start_index,
        )

    def create_cursor(
        self,
        history: Sequence[PageFilter],
        target_filter: PageFilter,
        target_index: int,
        *,
        current_index: int,
        next_filter: PageFilter | None,
        history_offset: int = 0,
    ) -> str:
        """Create an enhanced cursor for the page at ``target_index``.

        Emits a diagnostic when the encoded cursor is larger than
        ``size_warning_bytes``.
        """
        meta = self.build_metadata(
            history,
            target_filter,
            target_index,
            current_index=current_index,
            next_filter=next_filter,
            history_offset=history_offset,
        )
        token = self.encode(EnhancedCursor(page_filter=target_filter, meta=meta).to_wire())

        size = len(token)
        if size > self.size_warning_bytes:
            self.on_diagnostic(
                CursorDiagnostic(
                    size_bytes=size,
                    threshold_bytes=self.size_warning_bytes,
                    history_length=len(meta.navigation_history),
                    message=(
                        f"Cursor size {size} bytes exceeds {self.size_warning_bytes} bytes; "
                        f"lower maxNavigationHistory (currently "
                        f"{len(meta.navigation_history)} pages embedded)"
                    ),
                )
            )
        return token


__all__ = [
    "Cursor",
    "CursorCodec",
    "CursorDiagnostic",
    "CursorNavigationMeta",
    "DEFAULT_MAX_NAVIGATION_HISTORY",
    "DEFAULT_SIZE_WARNING_BYTES",
    "DiagnosticSink",
    "EnhancedCursor",
    "LegacyCursor",
    "META_KEY",
    "log_cursor_diagnostic",
]
