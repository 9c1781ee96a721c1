"""Main CLI entry point for translate-client."""

import click

from translate_client.cli.commands import chains, cursor, transactions
from translate_client.infra.logging.config import setup_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="translate-client")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Translate Client CLI - page through classified blockchain transactions.

    \b
    Commands:
      cursor   Inspect pagination cursors
      txs      Walk an account's transactions
      chains   List the chains of an ecosystem

    \b
    Quick Start:
      translate-client txs evm eth 0xabc --page-size 20 --pages 3
      translate-client txs evm eth 0xabc --cursor <token>
      translate-client cursor decode <token>
    """
    ctx.ensure_object(dict)


cli.add_command(cursor.cursor)
cli.add_command(transactions.txs)
cli.add_command(chains.chains)


def main() -> None:
    """Entry point for CLI."""
    setup_logging()
    cli(obj={})


if __name__ == "__main__":
    main()
