"""Error types raised by the MoneyMoney client, and their messages.

Every public call either returns a value or raises exactly one of these.
Callers are expected to catch by class rather than parse messages.
"""

from typing import Optional


class MoneyMoneyError(Exception):
    """Base class for all client errors."""


class TransportError(MoneyMoneyError):
    """The executor could not complete the round trip.

    The underlying process or IPC message is kept verbatim in ``str(error)``.
    """

    def __init__(
        self,
        message: str,
        returncode: Optional[int] = None,
        stderr: Optional[str] = None,
    ):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class ApplicationNotRunningError(TransportError):
    """MoneyMoney is not running, so no command could be delivered."""


class DecodeError(MoneyMoneyError):
    """Raw output could not be decoded into a node tree."""


class MalformedResponseError(DecodeError):
    """Raw output is not a well-formed property list."""


class EmptyResponseError(DecodeError):
    """The application returned no data at all."""


class ExperimentalFeatureDisabledError(MoneyMoneyError):
    """An experimental operation was called without enabling it."""


class DomainError(MoneyMoneyError, ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class MappingError(DomainError):
    """A decoded node did not satisfy a domain entity's contract."""


class MissingFieldError(MappingError):
    """A required key is absent from a record."""

    def __init__(self, field: str):
        super().__init__(missing_field(field))
        self.field = field


class TypeMismatchError(MappingError):
    """A key is present but holds the wrong kind of node."""

    def __init__(self, field: str, expected: str, actual: str):
        super().__init__(type_mismatch(field, expected, actual))
        self.field = field
        self.expected = expected
        self.actual = actual


class UnknownCurrencyError(MappingError):
    """A currency code is not in the supported code table."""

    def __init__(self, code: str):
        super().__init__(unknown_currency(code))
        self.code = code


class CyclicHierarchyError(MappingError):
    """A category is reachable from itself through parent links."""

    def __init__(self, uuid: str):
        super().__init__(f"Category hierarchy contains a cycle through '{uuid}'")
        self.uuid = uuid


class ValidationError(DomainError):
    """Caller-supplied parameters fail a precondition checked before submission."""


class TargetIsGroupAccountError(ValidationError):
    """The target account is an account group, not a postable account."""


class UnknownAccountError(ValidationError):
    """The target account is not in the supplied account list."""


class InvalidIbanError(ValidationError):
    """An IBAN failed the format or mod-97 checksum test."""


class InvalidAmountError(ValidationError):
    """An amount is not acceptable for the operation."""


class UnsupportedCurrencyError(ValidationError):
    """A currency is valid but not accepted by the operation."""


class DegenerateDateRangeError(ValidationError):
    """A date filter has its lower bound after its upper bound."""


class InvalidTransactionIdError(ValidationError):
    """A transaction identifier is present where it must not be, or vice versa."""


def missing_field(field: str) -> str:
    """Return message for a missing record key."""
    return f"Missing required field '{field}'"


def type_mismatch(field: str, expected: str, actual: str) -> str:
    """Return message for a key holding the wrong node type."""
    return f"Field '{field}' should be {expected}, got {actual}"


def unknown_currency(code: str) -> str:
    """Return message for a currency code outside the code table."""
    return f"Unknown currency code '{code}'"


def account_not_found(reference: str) -> str:
    """Return message for an account reference with no match."""
    return f"Account '{reference}' not found"


def group_account_target(name: str) -> str:
    """Return message when a transaction targets an account group."""
    return f"Account '{name}' is an account group and cannot hold transactions"


def invalid_iban(iban: str) -> str:
    """Return message for an IBAN that fails validation."""
    return f"Invalid IBAN '{iban}'"


def degenerate_date_range(from_date, to_date) -> str:
    """Return message for a from-date after the to-date."""
    return f"Start date {from_date} is after end date {to_date}"
