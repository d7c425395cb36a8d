"""CLI error handling helpers."""

import click

from moneymoney.domain.errors import MoneyMoneyError


def handle_domain_error(ctx: click.Context, error: MoneyMoneyError | ValueError) -> None:
    """Render a client error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
