"""Tests for the portfolio service."""

from decimal import Decimal

import pytest

from moneymoney.domain.errors import UnknownCurrencyError
from moneymoney.domain.params import ExportPortfolioParams
from moneymoney.domain.portfolio import PortfolioService


def test_export_portfolio(executor, load_fixture):
    """Test positions are exported and mapped."""
    executor.queue(load_fixture("portfolio"))

    positions = PortfolioService(executor).export_portfolio()

    assert executor.commands == ['tell application "MoneyMoney" to export portfolio as "plist"']
    assert [pos.uuid for pos in positions] == ["sec-world", "sec-bond"]
    assert sum(pos.market_value for pos in positions) == Decimal("2041.95")


def test_export_portfolio_with_filters(executor, plist):
    """Test account and asset class filters are sent."""
    executor.queue(plist("<array/>"))
    params = ExportPortfolioParams().with_account("Depot").with_asset_class("Fonds")

    assert PortfolioService(executor).export_portfolio(params) == []
    assert executor.commands == [
        'tell application "MoneyMoney" to export portfolio from account "Depot" '
        'from asset class "Fonds" as "plist"'
    ]


def test_export_portfolio_empty(executor):
    """Test no output means no positions."""
    executor.queue(None)

    assert PortfolioService(executor).export_portfolio() == []


def test_export_portfolio_unknown_currency(executor, plist):
    """Test a position in an unsupported currency fails the export."""
    executor.queue(
        plist(
            "<array><dict>"
            "<key>uuid</key><string>s</string>"
            "<key>name</key><string>Gold</string>"
            "<key>quantity</key><real>1</real>"
            "<key>currency</key><string>ABC</string>"
            "<key>marketValue</key><real>1</real>"
            "<key>accountUuid</key><string>a</string>"
            "</dict></array>"
        )
    )

    with pytest.raises(UnknownCurrencyError):
        PortfolioService(executor).export_portfolio()
