"""Account listing command."""

import click

from moneymoney.cli.error_handling import handle_domain_error
from moneymoney.domain.errors import MoneyMoneyError


@click.command("accounts")
@click.option("--all", "show_all", is_flag=True, help="Include account groups")
@click.pass_context
def list_accounts(ctx, show_all: bool):
    """List accounts with their balances.

    Account groups are hidden unless --all is given; accounts are indented
    below their group as in MoneyMoney's sidebar.

    Examples:
        moneymoney accounts
        moneymoney accounts --all
    """
    client = ctx.obj["client"]

    try:
        accounts = client.export_accounts()
    except MoneyMoneyError as e:
        handle_domain_error(ctx, e)

    if not show_all:
        accounts = [acc for acc in accounts if acc.is_postable]

    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 100)
    click.echo(f"{'Name':<36} {'Type':<20} {'Balance':>16} {'Account number':<26}")
    click.echo("-" * 100)
    for acc in accounts:
        name = ("  " * acc.indentation + acc.name)[:36]
        balance = f"{acc.balance.amount:,.2f} {acc.balance.currency}"
        click.echo(f"{name:<36} {acc.type_label[:20]:<20} {balance:>16} {acc.account_number:<26}")


def register_commands(cli: click.Group) -> None:
    """Register account commands with main CLI."""
    cli.add_command(list_accounts)
