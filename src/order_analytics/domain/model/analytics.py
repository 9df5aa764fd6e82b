"""Derived analytics records.

Nothing here is ever persisted: records are rebuilt from the current
catalog and orders on every calculation.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


@dataclass(frozen=True)
class OrderAnalytics:
    """Profitability of a single order.

    Every monetary and percentage field is already rounded to one
    decimal place.
    """

    order_no: str
    gross_sales: Decimal
    discounts: Decimal
    taxes: Decimal
    shipping: Decimal
    sales: Decimal
    total_cogs: Decimal
    gross_profit: Decimal
    gross_margin: Decimal


@dataclass(frozen=True)
class PortfolioTotals:
    """Sums of every monetary field across a set of order records.

    ``gross_margin`` is computed from the summed profit and summed sales.
    It is ``None`` when total sales are zero: the ratio is undefined and
    callers must render it explicitly.
    """

    order_count: int
    gross_sales: Decimal
    discounts: Decimal
    taxes: Decimal
    shipping: Decimal
    sales: Decimal
    total_cogs: Decimal
    gross_profit: Decimal
    gross_margin: Decimal | None


class MarginBand(Enum):
    HEALTHY = "HEALTHY"
    MODERATE = "MODERATE"
    THIN = "THIN"
    LOSS = "LOSS"


HEALTHY_MARGIN = Decimal("30")
MODERATE_MARGIN = Decimal("15")


def margin_band(margin: Decimal) -> MarginBand:
    """Classify a gross margin percentage for display."""
    if margin >= HEALTHY_MARGIN:
        return MarginBand.HEALTHY
    if margin >= MODERATE_MARGIN:
        return MarginBand.MODERATE
    if margin >= 0:
        return MarginBand.THIN
    return MarginBand.LOSS
