"""SEPA payment domain service (experimental)."""

from dataclasses import replace
from decimal import Decimal, InvalidOperation
from typing import Optional

from moneymoney.bridge.base import Executor
from moneymoney.bridge.commands import Operation
from moneymoney.bridge.mappers import acknowledgment_to_id
from moneymoney.domain.currency import SEPA_CURRENCIES, Currency
from moneymoney.domain.entities import DirectDebitOrder, TransferOrder
from moneymoney.domain.errors import (
    ExperimentalFeatureDisabledError,
    InvalidAmountError,
    InvalidIbanError,
    UnsupportedCurrencyError,
    ValidationError,
    invalid_iban,
)
from moneymoney.domain.service import Service
from moneymoney.utils.iban import is_valid_iban, normalize_iban

TRANSFER_INSTRUMENT_CODES = frozenset({"TRF", "INST"})
DIRECT_DEBIT_INSTRUMENT_CODES = frozenset({"CORE", "B2B"})
SEQUENCE_CODES = frozenset({"RCUR", "FNAL", "OOFF"})

_CENT = Decimal("0.01")


def _has_cents_only(amount: Decimal) -> bool:
    try:
        return amount == amount.quantize(_CENT)
    except InvalidOperation:
        # More digits than the context precision can hold
        return False


def _validate_payment(amount: Decimal, currency: Currency, iban: str) -> None:
    if not amount.is_finite() or amount <= 0:
        raise InvalidAmountError(f"Amount must be a positive number, got {amount}")
    if not _has_cents_only(amount):
        raise InvalidAmountError(f"Amount {amount} is not a whole number of cents")
    if currency not in SEPA_CURRENCIES:
        raise UnsupportedCurrencyError(f"SEPA payments must be in EUR, got {currency}")
    if not is_valid_iban(iban):
        raise InvalidIbanError(invalid_iban(iban))


def _validate_code(name: str, value: Optional[str], allowed: frozenset[str]) -> None:
    if value is not None and value not in allowed:
        raise ValidationError(f"Invalid {name} '{value}', expected one of {sorted(allowed)}")


class PaymentService(Service):
    """Service for submitting SEPA transfers and direct debits.

    These operations are experimental and only available when the service
    is created with ``experimental=True``. Every check runs before a command
    is built, so a rejected order never reaches MoneyMoney.

    Orders open MoneyMoney's payment window for confirmation unless
    ``into_outbox`` is set, in which case they are saved to the outbox.
    """

    def __init__(self, executor: Executor, experimental: bool = False):
        super().__init__(executor)
        self.experimental = experimental

    def _require_enabled(self, operation: Operation) -> None:
        if not self.experimental:
            raise ExperimentalFeatureDisabledError(
                f"'{operation.value}' is experimental; enable it with experimental=True"
            )

    def create_bank_transfer(self, order: TransferOrder) -> None:
        """Submit a SEPA credit transfer.

        Raises:
            ExperimentalFeatureDisabledError: If experimental operations are off
            InvalidAmountError: If the amount is not positive or has sub-cent digits
            UnsupportedCurrencyError: If the currency is not EUR
            InvalidIbanError: If the IBAN fails the mod-97 check
            ValidationError: If the instrument code is not TRF or INST
        """
        self._require_enabled(Operation.CREATE_BANK_TRANSFER)
        _validate_payment(order.amount, order.currency, order.iban)
        _validate_code("instrument code", order.instrument_code, TRANSFER_INSTRUMENT_CODES)

        order = replace(order, iban=normalize_iban(order.iban))
        acknowledgment_to_id(self._round_trip(Operation.CREATE_BANK_TRANSFER, order))

    def create_direct_debit(self, order: DirectDebitOrder) -> None:
        """Submit a SEPA direct debit.

        Raises:
            ExperimentalFeatureDisabledError: If experimental operations are off
            InvalidAmountError: If the amount is not positive or has sub-cent digits
            UnsupportedCurrencyError: If the currency is not EUR
            InvalidIbanError: If the IBAN fails the mod-97 check
            ValidationError: If the instrument or sequence code is unknown
        """
        self._require_enabled(Operation.CREATE_DIRECT_DEBIT)
        _validate_payment(order.amount, order.currency, order.iban)
        _validate_code("instrument code", order.instrument_code, DIRECT_DEBIT_INSTRUMENT_CODES)
        _validate_code("sequence code", order.sequence_code, SEQUENCE_CODES)

        order = replace(order, iban=normalize_iban(order.iban))
        acknowledgment_to_id(self._round_trip(Operation.CREATE_DIRECT_DEBIT, order))
