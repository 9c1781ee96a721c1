"""Cursor inspection commands."""

import sys

import click

from translate_client.cli.utils import echo_json, error, info
from translate_client.core.exceptions import InvalidCursorError
from translate_client.core.pagination import CursorCodec, EnhancedCursor, LegacyCursor


@click.group(name="cursor")
def cursor() -> None:
    """Inspect pagination cursors."""


@cursor.command()
@click.argument("token")
def decode(token: str) -> None:
    """Decode a pagination cursor and print it as JSON."""
    try:
        parsed = CursorCodec.parse(token)
    except InvalidCursorError as e:
        error(str(e))
        sys.exit(1)

    match parsed:
        case EnhancedCursor(meta=meta):
            info(
                f"Enhanced cursor: page {meta.absolute_page_index}, "
                f"{len(meta.navigation_history)} filters in history"
            )
        case LegacyCursor():
            info("Legacy cursor: no navigation history")

    echo_json(CursorCodec.decode(token), indent=2)
