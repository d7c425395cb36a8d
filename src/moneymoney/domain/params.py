"""Immutable filter parameters for export operations."""

from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

from moneymoney.domain.errors import DegenerateDateRangeError, degenerate_date_range


@dataclass(frozen=True)
class ExportTransactionsParams:
    """Filters for exporting transactions.

    Every filter is optional; an absent date bound means the range is open
    on that side. Build with the ``with_*`` methods, each of which returns a
    new instance:

        params = (
            ExportTransactionsParams()
            .with_from_date(date(2024, 1, 1))
            .with_to_date(date(2024, 12, 31))
            .with_account("DE89370400440532013000")
        )
    """

    from_date: Optional[date] = None
    to_date: Optional[date] = None
    account: Optional[str] = None
    category: Optional[str] = None

    def with_from_date(self, from_date: date) -> "ExportTransactionsParams":
        """Return a copy with an inclusive lower date bound."""
        return replace(self, from_date=from_date)

    def with_to_date(self, to_date: date) -> "ExportTransactionsParams":
        """Return a copy with an inclusive upper date bound."""
        return replace(self, to_date=to_date)

    def with_account(self, account: str) -> "ExportTransactionsParams":
        """Return a copy filtered to one account (UUID, IBAN, number or name)."""
        return replace(self, account=account)

    def with_category(self, category: str) -> "ExportTransactionsParams":
        """Return a copy filtered to one category (UUID or name)."""
        return replace(self, category=category)

    def validate(self) -> None:
        """Check the date range before the params are submitted.

        Raises:
            DegenerateDateRangeError: If from_date is after to_date
        """
        if (
            self.from_date is not None
            and self.to_date is not None
            and self.from_date > self.to_date
        ):
            raise DegenerateDateRangeError(
                degenerate_date_range(self.from_date, self.to_date)
            )


@dataclass(frozen=True)
class ExportPortfolioParams:
    """Filters for exporting portfolio positions."""

    account: Optional[str] = None
    asset_class: Optional[str] = None

    def with_account(self, account: str) -> "ExportPortfolioParams":
        """Return a copy filtered to one account."""
        return replace(self, account=account)

    def with_asset_class(self, asset_class: str) -> "ExportPortfolioParams":
        """Return a copy filtered to one asset class (UUID or name)."""
        return replace(self, asset_class=asset_class)
