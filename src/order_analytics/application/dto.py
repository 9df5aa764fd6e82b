"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Amounts stay Decimal;
``format_currency`` and ``format_percentage`` turn them into display text.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

UNDEFINED = "n/a"


def format_currency(value: Decimal) -> str:
    """One decimal place, e.g. ``$34.0`` or ``$-3.5``."""
    return f"${value:.1f}"


def format_percentage(value: Decimal | None) -> str:
    """One decimal place with a percent sign; ``n/a`` when undefined."""
    if value is None:
        return UNDEFINED
    return f"{value:.1f}%"


@dataclass(frozen=True)
class ProductDTO:
    id: int
    title: str
    category: str
    unit_price: str  # formatted, e.g. "$15.00"
    cogs: str


@dataclass(frozen=True)
class OrderSummaryDTO:
    order_no: str
    item_count: int
    discounts: Decimal
    taxes: Decimal
    shipping: Decimal


@dataclass(frozen=True)
class AnalyticsRowDTO:
    """Output: one order's profitability, already rounded."""

    order_no: str
    gross_sales: Decimal
    discounts: Decimal
    taxes: Decimal
    shipping: Decimal
    sales: Decimal
    total_cogs: Decimal
    gross_profit: Decimal
    gross_margin: Decimal
    margin_band: str


@dataclass(frozen=True)
class AnalyticsTotalsDTO:
    """Output: the TOTALS footer.  ``gross_margin`` is None when undefined."""

    order_count: int
    gross_sales: Decimal
    discounts: Decimal
    taxes: Decimal
    shipping: Decimal
    sales: Decimal
    total_cogs: Decimal
    gross_profit: Decimal
    gross_margin: Decimal | None


@dataclass(frozen=True)
class AnalyticsReportDTO:
    rows: list[AnalyticsRowDTO]
    totals: AnalyticsTotalsDTO
