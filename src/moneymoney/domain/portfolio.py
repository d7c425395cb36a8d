"""Portfolio domain service."""

from typing import Optional

from moneymoney.bridge.commands import Operation
from moneymoney.bridge.mappers import positions_to_domain
from moneymoney.domain.entities import PortfolioPosition
from moneymoney.domain.params import ExportPortfolioParams
from moneymoney.domain.service import Service


class PortfolioService(Service):
    """Service for reading securities holdings."""

    def export_portfolio(
        self, params: Optional[ExportPortfolioParams] = None
    ) -> list[PortfolioPosition]:
        """Export portfolio positions, optionally for one account or asset class."""
        return self._export(Operation.EXPORT_PORTFOLIO, params, positions_to_domain, [])
