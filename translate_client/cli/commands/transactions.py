"""Transaction listing commands."""

import sys

import click

from translate_client.cli.utils import coro, echo_json, error, info, warning
from translate_client.core.exceptions import TranslateClientError
from translate_client.core.pagination import PageFilter
from translate_client.infra.external.translate import ECOSYSTEM_CLIENTS
from translate_client.utils.retry import RetryError


@click.command(name="txs")
@click.argument("ecosystem", type=click.Choice(sorted(ECOSYSTEM_CLIENTS)))
@click.argument("chain")
@click.argument("address")
@click.option("--page-size", type=click.IntRange(min=1), default=None, help="Items per page")
@click.option("--pages", type=click.IntRange(min=1), default=1, show_default=True, help="Pages to walk")
@click.option("--cursor", "cursor_token", default=None, help="Resume from a cursor")
@click.option("--api-key", envvar="TRANSLATE_API_KEY", default=None, help="Translate API key")
@click.pass_context
@coro
async def txs(
    ctx: click.Context,
    ecosystem: str,
    chain: str,
    address: str,
    page_size: int | None,
    pages: int,
    cursor_token: str | None,
    api_key: str | None,
) -> None:
    """Walk an account's transactions and print one JSON item per line.

    The cursor for the following page is printed to stderr at the end, so
    the walk can be resumed with --cursor.
    """
    client_cls = ECOSYSTEM_CLIENTS[ecosystem]
    try:
        client = client_cls(api_key, transport=ctx.obj.get("transport"))
    except ValueError as e:
        error(str(e))
        sys.exit(1)

    async with client:
        try:
            if cursor_token:
                page = await client.transactions_from_cursor(chain, address, cursor_token)
            else:
                page = await client.transactions(chain, address, PageFilter(page_size=page_size))
        except (TranslateClientError, RetryError) as e:
            error(f"Failed to fetch transactions: {e}")
            sys.exit(1)

        walked = 1
        while True:
            for item in page.get_transactions():
                echo_json(item.to_dict())
            if walked >= pages or not page.has_next():
                break
            if not await page.next():
                warning(f"Stopped after {walked} pages: {page.last_error}")
                break
            walked += 1

        next_cursor = page.get_next_cursor()
        if next_cursor:
            info(f"Next cursor: {next_cursor}")
        else:
            info("No more pages")
