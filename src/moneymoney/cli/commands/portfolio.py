"""Portfolio command."""

import click

from moneymoney.cli.error_handling import handle_domain_error
from moneymoney.domain.errors import MoneyMoneyError
from moneymoney.domain.params import ExportPortfolioParams


@click.command("portfolio")
@click.option("--account", help="Securities account name, UUID or IBAN")
@click.option("--asset-class", help="Only positions of this asset class")
@click.pass_context
def show_portfolio(ctx, account: str | None, asset_class: str | None):
    """Show securities positions.

    Examples:
        moneymoney portfolio
        moneymoney portfolio --account "Depot" --asset-class "Fonds"
    """
    client = ctx.obj["client"]

    params = ExportPortfolioParams()
    if account:
        params = params.with_account(account)
    if asset_class:
        params = params.with_asset_class(asset_class)

    try:
        positions = client.export_portfolio(params)
    except MoneyMoneyError as e:
        handle_domain_error(ctx, e)

    if not positions:
        click.echo("No positions found.")
        return

    click.echo(f"\n{'Name':<34} {'ISIN':<13} {'Quantity':>12} {'Market value':>18} {'Profit':>14}")
    click.echo("-" * 95)
    for pos in positions:
        value = f"{pos.market_value:,.2f} {pos.currency}"
        profit = f"{pos.profit:,.2f}" if pos.profit is not None else ""
        click.echo(
            f"{pos.name[:34]:<34} {pos.isin:<13} {pos.quantity:>12,} {value:>18} {profit:>14}"
        )

    click.echo("-" * 95)
    for currency in sorted({pos.currency for pos in positions}):
        total = sum(pos.market_value for pos in positions if pos.currency == currency)
        click.echo(f"{'TOTAL':<34} {'':<13} {'':>12} {f'{total:,.2f} {currency}':>18}")


def register_commands(cli: click.Group) -> None:
    """Register portfolio command with main CLI."""
    cli.add_command(show_portfolio)
