"""Domain layer for the MoneyMoney client.

Services live in their own modules (``moneymoney.domain.account`` and so
on) and are not imported here, because they depend on ``moneymoney.bridge``,
which in turn imports the entities below.
"""

from moneymoney.domain.currency import Currency
from moneymoney.domain.entities import (
    Account,
    AccountType,
    Balance,
    Budget,
    Category,
    CategoryNode,
    DirectDebitOrder,
    PortfolioPosition,
    Transaction,
    TransactionsExport,
    TransferOrder,
)
from moneymoney.domain.params import ExportPortfolioParams, ExportTransactionsParams

__all__ = [
    "Account",
    "AccountType",
    "Balance",
    "Budget",
    "Category",
    "CategoryNode",
    "Currency",
    "DirectDebitOrder",
    "ExportPortfolioParams",
    "ExportTransactionsParams",
    "PortfolioPosition",
    "Transaction",
    "TransactionsExport",
    "TransferOrder",
]
