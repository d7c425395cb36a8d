"""Transaction domain service."""

import logging
from dataclasses import replace
from typing import Iterable, Optional

from moneymoney.bridge.commands import Operation
from moneymoney.bridge.mappers import acknowledgment_to_id, transactions_export_to_domain
from moneymoney.domain.account import AccountService
from moneymoney.domain.entities import Account, Transaction, TransactionsExport
from moneymoney.domain.errors import (
    InvalidTransactionIdError,
    TargetIsGroupAccountError,
    UnknownAccountError,
    account_not_found,
    group_account_target,
)
from moneymoney.domain.params import ExportTransactionsParams
from moneymoney.domain.service import Service

logger = logging.getLogger(__name__)


class TransactionService(Service):
    """Service for reading and writing transactions."""

    def export_transactions(
        self, params: Optional[ExportTransactionsParams] = None
    ) -> TransactionsExport:
        """Export transactions matching the given filters.

        Filtering is done by MoneyMoney; the result is returned exactly as
        exported.

        Args:
            params: Filters; None exports everything

        Returns:
            TransactionsExport, with no transactions if MoneyMoney returned
            no data

        Raises:
            DegenerateDateRangeError: If from_date is after to_date
        """
        params = params or ExportTransactionsParams()
        params.validate()
        return self._export(
            Operation.EXPORT_TRANSACTIONS,
            params,
            transactions_export_to_domain,
            TransactionsExport(creator="", transactions=()),
        )

    def add_transaction(
        self, transaction: Transaction, accounts: Iterable[Account]
    ) -> Optional[Transaction]:
        """Add a transaction to an offline account.

        MoneyMoney only books to the account, booking date, payee, amount,
        purpose and category; the other fields of ``transaction`` are not
        sent. The target account is looked up in ``accounts``, which the
        caller obtains from ``AccountService.export_accounts``.

        Args:
            transaction: New transaction; its id must be None
            accounts: Accounts from a previous export

        Returns:
            The transaction with the identifier MoneyMoney assigned, or None
            if MoneyMoney only confirmed success. In that case export the
            transactions again to see the stored record.

        Raises:
            InvalidTransactionIdError: If the transaction already has an id
            UnknownAccountError: If the target account is not in ``accounts``
            TargetIsGroupAccountError: If the target account is an account group
            EmptyResponseError: If MoneyMoney did not acknowledge the command
        """
        if transaction.id is not None:
            raise InvalidTransactionIdError(
                f"New transactions must not have an id (got {transaction.id})"
            )

        target = AccountService.find_account(accounts, transaction.account)
        if target is None:
            raise UnknownAccountError(account_not_found(transaction.account))
        if target.group:
            raise TargetIsGroupAccountError(group_account_target(target.name))

        node = self._round_trip(Operation.ADD_TRANSACTION, transaction)
        transaction_id = acknowledgment_to_id(node)
        if transaction_id is None:
            logger.debug("Transaction added without an echoed id")
            return None
        return replace(transaction, id=transaction_id)

    def set_transaction(self, transaction: Transaction) -> None:
        """Replace the editable fields of a stored transaction.

        MoneyMoney lets scripts edit a transaction's checkmark, category and
        comment. All three are always sent: a ``category`` or ``comment`` of
        None is sent as an empty value and CLEARS what MoneyMoney has
        stored. To change one field, start from the exported transaction
        and use ``dataclasses.replace``:

            service.set_transaction(replace(exported, comment="Reimbursed"))

        Args:
            transaction: Complete replacement; its id must be set

        Raises:
            InvalidTransactionIdError: If the transaction has no id
            EmptyResponseError: If MoneyMoney did not acknowledge the command
        """
        if transaction.id is None:
            raise InvalidTransactionIdError("Transaction id is required to update a transaction")

        node = self._round_trip(Operation.SET_TRANSACTION, transaction)
        acknowledgment_to_id(node)
