"""Set transaction command."""

from dataclasses import replace

import click

from moneymoney.cli.error_handling import handle_domain_error
from moneymoney.domain.errors import MoneyMoneyError
from moneymoney.domain.params import ExportTransactionsParams


@click.command("set")
@click.argument("transaction_id", type=int)
@click.option("--checkmark/--no-checkmark", default=None, help="Set or clear the checkmark")
@click.option("--category", help="Category name, or empty string to clear")
@click.option("--comment", help="Comment, or empty string to clear")
@click.option("--account", help="Account holding the transaction (narrows the lookup)")
@click.pass_context
def set_transaction(
    ctx,
    transaction_id: int,
    checkmark: bool | None,
    category: str | None,
    comment: str | None,
    account: str | None,
) -> None:
    """Update the checkmark, category or comment of a transaction.

    Only the options that are given change; the transaction is looked up
    first so the other fields keep their stored values.

    Examples:
        moneymoney set 4711 --checkmark
        moneymoney set 4711 --comment "Reimbursed" --account "Girokonto"
        moneymoney set 4711 --category ""  # Clear category
    """
    client = ctx.obj["client"]

    if checkmark is None and category is None and comment is None:
        click.echo("Error: Nothing to update; give --checkmark, --category or --comment", err=True)
        ctx.exit(1)

    params = ExportTransactionsParams()
    if account:
        params = params.with_account(account)

    try:
        export = client.export_transactions(params)
    except MoneyMoneyError as e:
        handle_domain_error(ctx, e)

    existing = next((txn for txn in export.transactions if txn.id == transaction_id), None)
    if existing is None:
        click.echo(f"Error: Transaction {transaction_id} not found", err=True)
        ctx.exit(1)

    updated = existing
    if checkmark is not None:
        updated = replace(updated, checkmark=checkmark)
    if category is not None:
        updated = replace(updated, category=category or None)
    if comment is not None:
        updated = replace(updated, comment=comment or None)

    try:
        client.set_transaction(updated)
    except MoneyMoneyError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated transaction {transaction_id}")


def register_commands(cli: click.Group) -> None:
    """Register set command with main CLI."""
    cli.add_command(set_transaction)
