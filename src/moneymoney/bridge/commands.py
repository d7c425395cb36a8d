"""Render typed requests as MoneyMoney AppleScript commands.

Every command addresses ``application "MoneyMoney"`` with the verbs and
parameter keywords from MoneyMoney's AppleScript dictionary. Optional
parameters that are absent are left out of the command entirely, because
MoneyMoney treats a missing parameter differently from an empty one.

Write commands return nothing from the application, so they get a second
line that returns a plist ``<true/>`` once the first line has completed.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from moneymoney.domain.entities import DirectDebitOrder, Transaction, TransferOrder
from moneymoney.domain.params import ExportPortfolioParams, ExportTransactionsParams

APPLICATION_NAME = "MoneyMoney"
ACKNOWLEDGMENT_PLIST = '<plist version="1.0"><true/></plist>'


class Operation(str, Enum):
    """Supported MoneyMoney AppleScript verbs."""

    EXPORT_ACCOUNTS = "export accounts"
    EXPORT_CATEGORIES = "export categories"
    EXPORT_TRANSACTIONS = "export transactions"
    EXPORT_PORTFOLIO = "export portfolio"
    ADD_TRANSACTION = "add transaction"
    SET_TRANSACTION = "set transaction"
    CREATE_BANK_TRANSFER = "create bank transfer"
    CREATE_DIRECT_DEBIT = "create direct debit"

    @property
    def is_write(self) -> bool:
        return self in _WRITE_OPERATIONS

    @property
    def is_experimental(self) -> bool:
        return self in (Operation.CREATE_BANK_TRANSFER, Operation.CREATE_DIRECT_DEBIT)


_WRITE_OPERATIONS = frozenset(
    {
        Operation.ADD_TRANSACTION,
        Operation.SET_TRANSACTION,
        Operation.CREATE_BANK_TRANSFER,
        Operation.CREATE_DIRECT_DEBIT,
    }
)


def quote(value: str) -> str:
    """Render a string as an AppleScript string literal."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def format_date(value: date) -> str:
    """Render a date as a quoted ``YYYY-MM-DD`` literal."""
    return quote(value.strftime("%Y-%m-%d"))


def format_amount(value: Decimal) -> str:
    """Render an amount in fixed-point notation with every given digit."""
    return format(value, "f")


def _clauses(*pairs: tuple[str, Optional[str]]) -> list[str]:
    # Drop clauses whose value is absent.
    return [f"{keyword} {value}" for keyword, value in pairs if value is not None]


def _optional_quote(value: Optional[str]) -> Optional[str]:
    return quote(value) if value is not None else None


def _optional_date(value: Optional[date]) -> Optional[str]:
    return format_date(value) if value is not None else None


def _export_transactions(params: ExportTransactionsParams) -> list[str]:
    return _clauses(
        ("from account", _optional_quote(params.account)),
        ("from category", _optional_quote(params.category)),
        ("from date", _optional_date(params.from_date)),
        ("to date", _optional_date(params.to_date)),
        ("as", quote("plist")),
    )


def _export_portfolio(params: Optional[ExportPortfolioParams]) -> list[str]:
    params = params or ExportPortfolioParams()
    return _clauses(
        ("from account", _optional_quote(params.account)),
        ("from asset class", _optional_quote(params.asset_class)),
        ("as", quote("plist")),
    )


def _add_transaction(transaction: Transaction) -> list[str]:
    return _clauses(
        ("to account", quote(transaction.account)),
        ("on date", format_date(transaction.booking_date)),
        ("to", quote(transaction.name)),
        ("amount", format_amount(transaction.amount)),
        ("purpose", _optional_quote(transaction.purpose)),
        ("category", _optional_quote(transaction.category)),
    )


def _set_transaction(transaction: Transaction) -> list[str]:
    # Full replacement: every mutable field is sent, absent ones as "".
    return _clauses(
        ("id", str(transaction.id)),
        ("checkmark to", quote("on" if transaction.checkmark else "off")),
        ("category to", quote(transaction.category or "")),
        ("comment to", quote(transaction.comment or "")),
    )


def _outbox(into_outbox: bool) -> Optional[str]:
    return quote("outbox") if into_outbox else None


def _create_bank_transfer(order: TransferOrder) -> list[str]:
    return _clauses(
        ("from account", quote(order.account)),
        ("to", quote(order.recipient)),
        ("iban", quote(order.iban)),
        ("bic", _optional_quote(order.bic)),
        ("amount", format_amount(order.amount)),
        ("purpose", _optional_quote(order.purpose)),
        ("endtoend reference", _optional_quote(order.end_to_end_reference)),
        ("purpose code", _optional_quote(order.purpose_code)),
        ("instrument code", _optional_quote(order.instrument_code)),
        ("scheduled date", _optional_date(order.scheduled_date)),
        ("into", _outbox(order.into_outbox)),
    )


def _create_direct_debit(order: DirectDebitOrder) -> list[str]:
    return _clauses(
        ("from account", quote(order.account)),
        ("for", quote(order.debtor)),
        ("iban", quote(order.iban)),
        ("bic", _optional_quote(order.bic)),
        ("amount", format_amount(order.amount)),
        ("purpose", _optional_quote(order.purpose)),
        ("endtoend reference", _optional_quote(order.end_to_end_reference)),
        ("purpose code", _optional_quote(order.purpose_code)),
        ("instrument code", _optional_quote(order.instrument_code)),
        ("sequence code", _optional_quote(order.sequence_code)),
        ("mandate reference", quote(order.mandate_reference)),
        ("mandate date", format_date(order.mandate_date)),
        ("scheduled date", _optional_date(order.scheduled_date)),
        ("into", _outbox(order.into_outbox)),
    )


_RENDERERS = {
    Operation.EXPORT_ACCOUNTS: lambda params: [],
    Operation.EXPORT_CATEGORIES: lambda params: [],
    Operation.EXPORT_TRANSACTIONS: _export_transactions,
    Operation.EXPORT_PORTFOLIO: _export_portfolio,
    Operation.ADD_TRANSACTION: _add_transaction,
    Operation.SET_TRANSACTION: _set_transaction,
    Operation.CREATE_BANK_TRANSFER: _create_bank_transfer,
    Operation.CREATE_DIRECT_DEBIT: _create_direct_debit,
}


def build_command(operation: Operation, params: Any = None) -> str:
    """Render an operation and its parameters as AppleScript source.

    Args:
        operation: Operation to perform
        params: The operation's parameter object, or None for exports
            without parameters

    Returns:
        AppleScript source, one statement per line
    """
    clauses = _RENDERERS[operation](params)
    statement = " ".join(
        [f"tell application {quote(APPLICATION_NAME)} to {operation.value}", *clauses]
    )
    if operation.is_write:
        return f"{statement}\nreturn {quote(ACKNOWLEDGMENT_PLIST)}"
    return statement
