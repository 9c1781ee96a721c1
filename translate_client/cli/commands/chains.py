"""Chain listing command."""

import sys

import click

from translate_client.cli.utils import coro, echo_json, error
from translate_client.core.exceptions import TranslateClientError
from translate_client.infra.external.translate import ECOSYSTEM_CLIENTS
from translate_client.utils.retry import RetryError


@click.command(name="chains")
@click.argument("ecosystem", type=click.Choice(sorted(ECOSYSTEM_CLIENTS)))
@click.option("--api-key", envvar="TRANSLATE_API_KEY", default=None, help="Translate API key")
@click.pass_context
@coro
async def chains(ctx: click.Context, ecosystem: str, api_key: str | None) -> None:
    """List the chains supported by an ecosystem."""
    try:
        client = ECOSYSTEM_CLIENTS[ecosystem](api_key, transport=ctx.obj.get("transport"))
    except ValueError as e:
        error(str(e))
        sys.exit(1)

    async with client:
        try:
            for chain in await client.get_chains():
                echo_json(chain.to_dict())
        except (TranslateClientError, RetryError) as e:
            error(f"Failed to list chains: {e}")
            sys.exit(1)
