"""SEPA payment commands (experimental)."""

import click

from moneymoney.cli.error_handling import handle_domain_error
from moneymoney.domain.entities import DirectDebitOrder, TransferOrder
from moneymoney.domain.errors import MoneyMoneyError
from moneymoney.utils.amount_parser import parse_amount
from moneymoney.utils.date_parser import parse_date


def _parse_amount_or_exit(ctx, amount: str):
    try:
        return parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)


def _parse_date_or_exit(ctx, value: str | None, label: str):
    if value is None:
        return None
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


@click.command("transfer")
@click.argument("account", metavar="ACCOUNT")
@click.argument("recipient", metavar="RECIPIENT")
@click.argument("iban", metavar="IBAN")
@click.argument("amount", metavar="AMOUNT")
@click.option("--purpose", help="Purpose (Verwendungszweck)")
@click.option("--bic", help="Recipient BIC")
@click.option("--end-to-end-reference", help="SEPA end-to-end reference")
@click.option("--purpose-code", help="SEPA purpose code (e.g. SALA)")
@click.option("--instant", is_flag=True, help="Send as SEPA instant payment (INST)")
@click.option("--scheduled-date", help="Execution date")
@click.option("--outbox", is_flag=True, help="Save to the outbox instead of opening the payment window")
@click.pass_context
def create_transfer(
    ctx,
    account: str,
    recipient: str,
    iban: str,
    amount: str,
    purpose: str | None,
    bic: str | None,
    end_to_end_reference: str | None,
    purpose_code: str | None,
    instant: bool,
    scheduled_date: str | None,
    outbox: bool,
) -> None:
    """Create a SEPA credit transfer (requires --experimental).

    Examples:
        moneymoney --experimental transfer "Girokonto" "Max Mustermann" "DE89 3704 0044 0532 0130 00" 42,00
        moneymoney --experimental transfer "Girokonto" "ACME" DE89370400440532013000 10 --outbox
    """
    client = ctx.obj["client"]

    order = TransferOrder(
        account=account,
        recipient=recipient,
        iban=iban,
        amount=_parse_amount_or_exit(ctx, amount),
        purpose=purpose,
        bic=bic,
        end_to_end_reference=end_to_end_reference,
        purpose_code=purpose_code,
        instrument_code="INST" if instant else None,
        scheduled_date=_parse_date_or_exit(ctx, scheduled_date, "scheduled date"),
        into_outbox=outbox,
    )

    try:
        client.create_bank_transfer(order)
    except MoneyMoneyError as e:
        handle_domain_error(ctx, e)

    destination = "outbox" if outbox else "payment window"
    click.echo(f"Transfer of {order.amount:,.2f} {order.currency} to {recipient} sent to {destination}")


@click.command("direct-debit")
@click.argument("account", metavar="ACCOUNT")
@click.argument("debtor", metavar="DEBTOR")
@click.argument("iban", metavar="IBAN")
@click.argument("amount", metavar="AMOUNT")
@click.option("--mandate-reference", required=True, help="SEPA mandate reference")
@click.option("--mandate-date", required=True, help="Date the mandate was signed")
@click.option("--purpose", help="Purpose (Verwendungszweck)")
@click.option("--bic", help="Debtor BIC")
@click.option("--end-to-end-reference", help="SEPA end-to-end reference")
@click.option("--purpose-code", help="SEPA purpose code")
@click.option(
    "--sequence",
    type=click.Choice(["RCUR", "FNAL", "OOFF"], case_sensitive=False),
    help="Sequence type",
)
@click.option("--b2b", is_flag=True, help="Business-to-business scheme instead of CORE")
@click.option("--scheduled-date", help="Collection date")
@click.option("--outbox", is_flag=True, help="Save to the outbox instead of opening the payment window")
@click.pass_context
def create_direct_debit(
    ctx,
    account: str,
    debtor: str,
    iban: str,
    amount: str,
    mandate_reference: str,
    mandate_date: str,
    purpose: str | None,
    bic: str | None,
    end_to_end_reference: str | None,
    purpose_code: str | None,
    sequence: str | None,
    b2b: bool,
    scheduled_date: str | None,
    outbox: bool,
) -> None:
    """Create a SEPA direct debit (requires --experimental).

    Examples:
        moneymoney --experimental direct-debit "Girokonto" "Erika Mustermann" \\
            DE89370400440532013000 25,00 --mandate-reference M-001 --mandate-date 2024-01-01
    """
    client = ctx.obj["client"]

    order = DirectDebitOrder(
        account=account,
        debtor=debtor,
        iban=iban,
        amount=_parse_amount_or_exit(ctx, amount),
        mandate_reference=mandate_reference,
        mandate_date=_parse_date_or_exit(ctx, mandate_date, "mandate date"),
        purpose=purpose,
        bic=bic,
        end_to_end_reference=end_to_end_reference,
        purpose_code=purpose_code,
        instrument_code="B2B" if b2b else None,
        sequence_code=sequence.upper() if sequence else None,
        scheduled_date=_parse_date_or_exit(ctx, scheduled_date, "scheduled date"),
        into_outbox=outbox,
    )

    try:
        client.create_direct_debit(order)
    except MoneyMoneyError as e:
        handle_domain_error(ctx, e)

    destination = "outbox" if outbox else "payment window"
    click.echo(f"Direct debit of {order.amount:,.2f} {order.currency} from {debtor} sent to {destination}")


def register_commands(cli: click.Group) -> None:
    """Register payment commands with main CLI."""
    cli.add_command(create_transfer)
    cli.add_command(create_direct_debit)
