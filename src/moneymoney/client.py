"""Client facade bundling all MoneyMoney operations."""

from typing import Iterable, Optional

from moneymoney.bridge.base import Executor
from moneymoney.bridge.factories import create_osascript_executor
from moneymoney.config import ClientConfig
from moneymoney.domain.account import AccountService
from moneymoney.domain.category import CategoryService
from moneymoney.domain.entities import (
    Account,
    Category,
    CategoryNode,
    DirectDebitOrder,
    PortfolioPosition,
    Transaction,
    TransactionsExport,
    TransferOrder,
)
from moneymoney.domain.params import ExportPortfolioParams, ExportTransactionsParams
from moneymoney.domain.payment import PaymentService
from moneymoney.domain.portfolio import PortfolioService
from moneymoney.domain.transaction import TransactionService


class MoneyMoney:
    """One entry point per MoneyMoney operation.

    Each call is a single blocking round trip with no state kept between
    calls. MoneyMoney applies writes one at a time; callers issuing writes
    from several threads must serialize them themselves.

    Example:
        client = MoneyMoney()
        accounts = client.export_accounts()
        export = client.export_transactions(
            ExportTransactionsParams().with_from_date(date(2024, 1, 1))
        )
    """

    def __init__(
        self,
        executor: Optional[Executor] = None,
        config: Optional[ClientConfig] = None,
    ):
        """Initialize client.

        Args:
            executor: Executor to reach MoneyMoney. Defaults to osascript.
            config: Client configuration. If None, it is read from the
                MONEYMONEY_* environment variables.
        """
        self.config = config if config is not None else ClientConfig.from_env()
        self.executor = executor if executor is not None else create_osascript_executor(self.config)

        self.accounts = AccountService(self.executor)
        self.categories = CategoryService(self.executor)
        self.transactions = TransactionService(self.executor)
        self.portfolio = PortfolioService(self.executor)
        self.payments = PaymentService(self.executor, experimental=self.config.experimental)

    def export_accounts(self) -> list[Account]:
        return self.accounts.export_accounts()

    def export_categories(self) -> list[Category]:
        return self.categories.export_categories()

    def category_tree(self) -> list[CategoryNode]:
        return self.categories.category_tree()

    def export_transactions(
        self, params: Optional[ExportTransactionsParams] = None
    ) -> TransactionsExport:
        return self.transactions.export_transactions(params)

    def export_portfolio(
        self, params: Optional[ExportPortfolioParams] = None
    ) -> list[PortfolioPosition]:
        return self.portfolio.export_portfolio(params)

    def add_transaction(
        self, transaction: Transaction, accounts: Iterable[Account]
    ) -> Optional[Transaction]:
        return self.transactions.add_transaction(transaction, accounts)

    def set_transaction(self, transaction: Transaction) -> None:
        self.transactions.set_transaction(transaction)

    def create_bank_transfer(self, order: TransferOrder) -> None:
        self.payments.create_bank_transfer(order)

    def create_direct_debit(self, order: DirectDebitOrder) -> None:
        self.payments.create_direct_debit(order)
