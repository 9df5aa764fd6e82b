"""Application service: Show Analytics use case (query).

Loads the current catalog and orders and runs the calculator on every
call.  Nothing is cached, so a product edit shows up in the very next
report.
"""

from __future__ import annotations

from order_analytics.application.dto import (
    AnalyticsReportDTO,
    AnalyticsRowDTO,
    AnalyticsTotalsDTO,
)
from order_analytics.domain.exceptions import EntityNotFoundError
from order_analytics.domain.model.analytics import (
    OrderAnalytics,
    PortfolioTotals,
    margin_band,
)
from order_analytics.domain.repository.order_repository import OrderRepository
from order_analytics.domain.repository.product_repository import ProductRepository
from order_analytics.domain.service.analytics_calculator import (
    analyze_orders,
    portfolio_totals,
)


class ShowAnalyticsHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, order_no: str | None = None) -> AnalyticsReportDTO:
        """Build the analytics report for all orders, or just one."""
        if order_no is None:
            orders = self._order_repo.list_all()
        else:
            order = self._order_repo.get_by_order_no(order_no)
            if order is None:
                raise EntityNotFoundError(f"Order '{order_no}' not found")
            orders = [order]

        records = analyze_orders(orders, self._product_repo.list_all())
        totals = portfolio_totals(records)

        return AnalyticsReportDTO(
            rows=[self._to_row(r) for r in records],
            totals=self._to_totals(totals),
        )

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_row(record: OrderAnalytics) -> AnalyticsRowDTO:
        return AnalyticsRowDTO(
            order_no=record.order_no,
            gross_sales=record.gross_sales,
            discounts=record.discounts,
            taxes=record.taxes,
            shipping=record.shipping,
            sales=record.sales,
            total_cogs=record.total_cogs,
            gross_profit=record.gross_profit,
            gross_margin=record.gross_margin,
            margin_band=margin_band(record.gross_margin).value,
        )

    @staticmethod
    def _to_totals(totals: PortfolioTotals) -> AnalyticsTotalsDTO:
        return AnalyticsTotalsDTO(
            order_count=totals.order_count,
            gross_sales=totals.gross_sales,
            discounts=totals.discounts,
            taxes=totals.taxes,
            shipping=totals.shipping,
            sales=totals.sales,
            total_cogs=totals.total_cogs,
            gross_profit=totals.gross_profit,
            gross_margin=totals.gross_margin,
        )
