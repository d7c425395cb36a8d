"""Account domain service."""

from typing import Iterable, Optional

from moneymoney.bridge.commands import Operation
from moneymoney.bridge.mappers import accounts_to_domain
from moneymoney.domain.entities import Account
from moneymoney.domain.service import Service
from moneymoney.utils.iban import normalize_iban


class AccountService(Service):
    """Service for reading accounts."""

    def export_accounts(self) -> list[Account]:
        """Export all accounts and account groups.

        Returns:
            Accounts in MoneyMoney's sidebar order; empty if MoneyMoney
            returned no data

        Raises:
            TransportError: If MoneyMoney could not be reached
            MalformedResponseError: If the answer is not a valid plist
            MappingError: If any account record is invalid
        """
        return self._export(Operation.EXPORT_ACCOUNTS, None, accounts_to_domain, [])

    def list_postable_accounts(self) -> list[Account]:
        """Export accounts, leaving out account groups."""
        return [account for account in self.export_accounts() if account.is_postable]

    @staticmethod
    def find_account(accounts: Iterable[Account], reference: str) -> Optional[Account]:
        """Find an account by UUID, name or account number (IBAN).

        Args:
            accounts: Accounts from a previous export
            reference: UUID, account name, or account number

        Returns:
            The first matching account, or None
        """
        accounts = list(accounts)
        for account in accounts:
            if account.uuid == reference:
                return account
        for account in accounts:
            if account.name == reference:
                return account

        normalized = normalize_iban(reference)
        for account in accounts:
            if account.account_number and normalize_iban(account.account_number) == normalized:
                return account
        return None
