"""Add transaction command."""

import click

from moneymoney.cli.account_resolution import resolve_account_or_exit
from moneymoney.cli.error_handling import handle_domain_error
from moneymoney.domain.entities import Transaction
from moneymoney.domain.errors import MoneyMoneyError
from moneymoney.utils.amount_parser import parse_amount
from moneymoney.utils.date_parser import parse_date


@click.command("add")
@click.argument("account", metavar="ACCOUNT")
@click.argument("date", metavar="DATE")
@click.argument("payee", metavar="PAYEE")
@click.argument("amount", metavar="AMOUNT")
@click.option("--purpose", help="Purpose (Verwendungszweck)")
@click.option("--category", help="Category name (use backslash for nested categories)")
@click.pass_context
def add_transaction(
    ctx,
    account: str,
    date: str,
    payee: str,
    amount: str,
    purpose: str | None,
    category: str | None,
):
    """Add a transaction to an offline account.

    ACCOUNT can be an account name, UUID or IBAN. DATE accepts YYYY-MM-DD,
    DD.MM.YYYY or 'today'. AMOUNT is negative for expenses and may use a
    decimal comma.

    Examples:
        moneymoney add "Bargeld" today "Bäckerei" -- -3,50
        moneymoney add "Girokonto" 2024-01-15 "ACME GmbH" 1200.00 --category "Gehalt"
    """
    client = ctx.obj["client"]

    try:
        txn_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        accounts = client.export_accounts()
    except MoneyMoneyError as e:
        handle_domain_error(ctx, e)
    target = resolve_account_or_exit(ctx, accounts, account)

    transaction = Transaction(
        id=None,
        account=account,
        booking_date=txn_date,
        value_date=txn_date,
        amount=txn_amount,
        currency=target.currency,
        name=payee,
        purpose=purpose,
        category=category,
    )

    try:
        created = client.add_transaction(transaction, accounts)
    except MoneyMoneyError as e:
        handle_domain_error(ctx, e)

    if created is not None:
        click.echo(f"Created transaction {created.id}")
    else:
        click.echo("Created transaction")
    click.echo(f"  Account: {target.name}")
    click.echo(f"  Date: {txn_date}")
    click.echo(f"  Amount: {txn_amount:,.2f} {target.currency}")
    click.echo(f"  Name: {payee}")
    if purpose:
        click.echo(f"  Purpose: {purpose}")
    if category:
        click.echo(f"  Category: {category}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
