"""Transaction export command."""

import click

from moneymoney.cli.date_filters import period_options, resolve_cli_date_range
from moneymoney.cli.error_handling import handle_domain_error
from moneymoney.domain.errors import MoneyMoneyError
from moneymoney.domain.params import ExportTransactionsParams


@click.command("transactions")
@click.option("--start-date", help="Start date (YYYY-MM-DD, DD.MM.YYYY or relative like 'last month')")
@click.option("--end-date", help="End date (YYYY-MM-DD, DD.MM.YYYY or relative like 'today')")
@period_options
@click.option("--account", help="Account name, UUID or IBAN")
@click.option("--category", help="Category name (use backslash for nested categories)")
@click.option("--verbose", "-v", is_flag=True, help="Show all fields including purpose and comment")
@click.pass_context
def list_transactions(
    ctx,
    start_date: str | None,
    end_date: str | None,
    account: str | None,
    category: str | None,
    verbose: bool,
    **periods: bool,
):
    """Export transactions with optional filters.

    Filtering is done by MoneyMoney. Without a date filter MoneyMoney
    decides how far back the export goes.

    Examples:
        moneymoney transactions --this-month
        moneymoney transactions --start-date 2024-01-01 --account "Girokonto"
        moneymoney transactions --last-year --category "Lebensmittel"
    """
    client = ctx.obj["client"]

    period_flags = {name.replace("_", "-"): is_set for name, is_set in periods.items()}
    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, period_flags=period_flags
    )

    params = ExportTransactionsParams()
    if start is not None:
        params = params.with_from_date(start)
    if end is not None:
        params = params.with_to_date(end)
    if account:
        params = params.with_account(account)
    if category:
        params = params.with_category(category)

    try:
        export = client.export_transactions(params)
    except MoneyMoneyError as e:
        handle_domain_error(ctx, e)

    transactions = export.transactions
    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    if verbose:
        click.echo("=" * 100)
        for txn in transactions:
            click.echo(f"\nTransaction ID: {txn.id}")
            click.echo(f"  Booking date: {txn.booking_date}")
            click.echo(f"  Value date: {txn.value_date}")
            click.echo(f"  Amount: {txn.amount:,.2f} {txn.currency}")
            click.echo(f"  Name: {txn.name}")
            if txn.account_number:
                click.echo(f"  Account number: {txn.account_number}")
            if txn.purpose:
                click.echo(f"  Purpose: {txn.purpose}")
            click.echo(f"  Category: {txn.category or 'Uncategorized'}")
            if txn.comment:
                click.echo(f"  Comment: {txn.comment}")
            click.echo(f"  Checked: {'yes' if txn.checkmark else 'no'}")
            if not txn.booked:
                click.echo("  Pending")
            click.echo("-" * 100)
    else:
        click.echo("-" * 100)
        click.echo(f"{'ID':<8} {'Date':<12} {'Amount':>14} {'Name':<34} {'Purpose':<30}")
        click.echo("-" * 100)
        for txn in transactions:
            amount_str = f"{txn.amount:,.2f} {txn.currency}"
            marker = "" if txn.booked else " *"
            click.echo(
                f"{txn.id:<8} {str(txn.booking_date):<12} {amount_str:>14} "
                f"{txn.name[:34]:<34} {(txn.purpose or '')[:30]:<30}{marker}"
            )

    total_expenses = sum(txn.amount for txn in transactions if txn.amount < 0)
    total_income = sum(txn.amount for txn in transactions if txn.amount > 0)
    click.echo("-" * 100)
    click.echo(
        f"{'TOTAL':<8} Expenses: {abs(total_expenses):,.2f} | "
        f"Income: {total_income:,.2f} | Count: {len(transactions)}"
    )


def register_commands(cli: click.Group) -> None:
    """Register transaction commands with main CLI."""
    cli.add_command(list_transactions)
