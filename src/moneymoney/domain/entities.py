"""Domain model entities for the MoneyMoney client.

These are pure data classes representing MoneyMoney's records, independent
of the property-list layout the application uses to transport them. Read
entities are only ever produced by the mappers in ``moneymoney.bridge``;
write entities are built by the caller and passed in whole.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from moneymoney.domain.currency import Currency


class AccountType(str, Enum):
    """Account type as reported by MoneyMoney."""

    GROUP = "Account group"
    GIRO = "Giro account"
    SAVINGS = "Savings account"
    FIXED_TERM_DEPOSIT = "Fixed term deposit"
    LOAN = "Loan account"
    CREDIT_CARD = "Credit card"
    CASH = "Cash"
    OTHER = "Other"

    @classmethod
    def from_label(cls, label: str) -> "AccountType":
        """Resolve an English or German label, falling back to OTHER."""
        return _ACCOUNT_TYPE_LABELS.get(label, cls.OTHER)


_ACCOUNT_TYPE_LABELS = {
    "Account group": AccountType.GROUP,
    "Kontengruppe": AccountType.GROUP,
    "Giro account": AccountType.GIRO,
    "Girokonto": AccountType.GIRO,
    "Savings account": AccountType.SAVINGS,
    "Sparkonto": AccountType.SAVINGS,
    "Fixed term deposit": AccountType.FIXED_TERM_DEPOSIT,
    "Festgeldanlage": AccountType.FIXED_TERM_DEPOSIT,
    "Loan account": AccountType.LOAN,
    "Darlehenskonto": AccountType.LOAN,
    "Credit card": AccountType.CREDIT_CARD,
    "Kreditkarte": AccountType.CREDIT_CARD,
    "Cash": AccountType.CASH,
    "Bargeld": AccountType.CASH,
    "Other": AccountType.OTHER,
    "Sonstige": AccountType.OTHER,
}


@dataclass(frozen=True)
class Balance:
    """An amount together with its currency."""

    amount: Decimal
    currency: Currency


@dataclass(frozen=True)
class Account:
    """Account or account group domain entity."""

    uuid: str
    name: str
    group: bool
    account_type: AccountType
    type_label: str
    currency: Currency
    balance: Balance
    account_number: str = ""
    bank_code: str = ""
    owner: str = ""
    portfolio: bool = False
    indentation: int = 0
    refresh_timestamp: Optional[datetime] = None
    attributes: dict[str, str] = field(default_factory=dict, compare=False)

    @property
    def is_postable(self) -> bool:
        """Whether transactions can be booked to this account."""
        return not self.group


@dataclass(frozen=True)
class Budget:
    """Budget attached to a category."""

    amount: Decimal
    available: Decimal
    currency: Currency
    period: str


@dataclass(frozen=True)
class Category:
    """Category domain entity with hierarchical structure."""

    uuid: str
    name: str
    parent_uuid: Optional[str]
    budget: Optional[Budget]
    currency: Currency
    group: bool = False
    default: bool = False
    indentation: int = 0


@dataclass(frozen=True)
class CategoryNode:
    """A category with its resolved children."""

    category: Category
    children: tuple["CategoryNode", ...] = ()


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity.

    ``id`` is None for transactions that have not been stored by MoneyMoney
    yet. ``account`` holds the account UUID on exported transactions and any
    account reference MoneyMoney accepts (UUID, name, IBAN) on new ones.
    """

    id: Optional[int]
    account: str
    booking_date: date
    value_date: date
    amount: Decimal
    currency: Currency
    name: str
    account_number: str = ""
    bank_code: str = ""
    purpose: Optional[str] = None
    category: Optional[str] = None
    checkmark: bool = False
    comment: Optional[str] = None
    booked: bool = True


@dataclass(frozen=True)
class TransactionsExport:
    """Result of exporting transactions."""

    creator: str
    transactions: tuple[Transaction, ...]


@dataclass(frozen=True)
class PortfolioPosition:
    """A security held in a portfolio account."""

    uuid: str
    name: str
    quantity: Decimal
    currency: Currency
    market_value: Decimal
    account_uuid: str
    account_name: str
    isin: str = ""
    wkn: str = ""
    symbol: str = ""
    price: Optional[Decimal] = None
    purchase_price: Optional[Decimal] = None
    purchase_value: Optional[Decimal] = None
    profit: Optional[Decimal] = None
    profit_percent: Optional[Decimal] = None
    asset_class: str = ""


@dataclass(frozen=True)
class TransferOrder:
    """SEPA credit transfer request."""

    account: str
    recipient: str
    iban: str
    amount: Decimal
    currency: Currency = Currency.EUR
    purpose: Optional[str] = None
    bic: Optional[str] = None
    end_to_end_reference: Optional[str] = None
    purpose_code: Optional[str] = None
    instrument_code: Optional[str] = None
    scheduled_date: Optional[date] = None
    into_outbox: bool = False


@dataclass(frozen=True)
class DirectDebitOrder:
    """SEPA direct debit request."""

    account: str
    debtor: str
    iban: str
    amount: Decimal
    mandate_reference: str
    mandate_date: date
    currency: Currency = Currency.EUR
    purpose: Optional[str] = None
    bic: Optional[str] = None
    end_to_end_reference: Optional[str] = None
    purpose_code: Optional[str] = None
    instrument_code: Optional[str] = None
    sequence_code: Optional[str] = None
    scheduled_date: Optional[date] = None
    into_outbox: bool = False
