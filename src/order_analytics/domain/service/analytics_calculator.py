"""Domain service: Order Analytics Calculator.

Pure functions that derive profitability figures from an order and the
product catalog, and reduce per-order records into portfolio totals.
No I/O, no shared state and no caching: every call recomputes from its
inputs, so results always reflect current catalog prices.

Formulas::

    gross sales   = sum(unit price x quantity)
    total COGS    = sum(unit cost x quantity)
    sales         = gross sales + taxes - discounts + shipping
    gross profit  = sales - total COGS
    gross margin  = gross profit / sales x 100      (0 when sales == 0)

Every public result goes through ``round_to_one_decimal`` and through
nothing else.  Line items whose product is not in the catalog contribute
zero; that is a tolerance policy, not an error.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from decimal import ROUND_FLOOR, Decimal

from order_analytics.domain.model.analytics import OrderAnalytics, PortfolioTotals
from order_analytics.domain.model.order import LineItem, Order
from order_analytics.domain.model.product import Product
from order_analytics.domain.model.value_objects import Number, to_decimal

logger = logging.getLogger(__name__)

Catalog = Mapping[int, Product] | Iterable[Product]

_TEN = Decimal("10")
_HALF = Decimal("0.5")
_HUNDRED = Decimal("100")
_ZERO = Decimal("0")
_ONE_PLACE = Decimal("0.1")


def round_to_one_decimal(value: Number) -> Decimal:
    """Round half up on the value scaled by ten.

    Halves move toward positive infinity: 2.25 -> 2.3 and -2.25 -> -2.2.
    """
    scaled = to_decimal(value) * _TEN + _HALF
    rounded = scaled.to_integral_value(rounding=ROUND_FLOOR) / _TEN
    return rounded.quantize(_ONE_PLACE)


def index_catalog(catalog: Catalog) -> Mapping[int, Product]:
    """Build an id -> product lookup once per calculation batch.

    A mapping is taken to be an index already and is returned as is.
    """
    if isinstance(catalog, Mapping):
        return catalog
    return {product.id: product for product in catalog}


def gross_sales(line_items: Iterable[LineItem], catalog: Catalog) -> Decimal:
    """Sum of unit price x quantity over items with a known product."""
    products = index_catalog(catalog)
    total = _ZERO
    for product, item in _resolve(line_items, products):
        total += product.unit_price.amount * item.quantity
    return round_to_one_decimal(total)


def total_cogs(line_items: Iterable[LineItem], catalog: Catalog) -> Decimal:
    """Sum of unit cost x quantity over items with a known product."""
    products = index_catalog(catalog)
    total = _ZERO
    for product, item in _resolve(line_items, products):
        total += product.cogs.amount * item.quantity
    return round_to_one_decimal(total)


def sales(
    gross_sales: Number,
    taxes: Number,
    discounts: Number,
    shipping: Number,
) -> Decimal:
    """Taxes and shipping add to sales, discounts reduce it."""
    value = (
        to_decimal(gross_sales)
        + to_decimal(taxes)
        - to_decimal(discounts)
        + to_decimal(shipping)
    )
    return round_to_one_decimal(value)


def gross_profit(sales: Number, total_cogs: Number) -> Decimal:
    """Sales minus COGS.  Negative results are losses, not errors."""
    return round_to_one_decimal(to_decimal(sales) - to_decimal(total_cogs))


def gross_margin(gross_profit: Number, sales: Number) -> Decimal:
    """Profit as a percentage of sales; exactly 0 when sales are 0."""
    sales_value = to_decimal(sales)
    if sales_value == 0:
        return _ZERO
    return round_to_one_decimal(to_decimal(gross_profit) / sales_value * _HUNDRED)


def order_analytics(order: Order, catalog: Catalog) -> OrderAnalytics:
    """Compose the full profitability record for one order."""
    products = index_catalog(catalog)

    order_gross_sales = gross_sales(order.line_items, products)
    order_cogs = total_cogs(order.line_items, products)
    order_sales = sales(order_gross_sales, order.taxes, order.discounts, order.shipping)
    order_profit = gross_profit(order_sales, order_cogs)

    return OrderAnalytics(
        order_no=order.order_no,
        gross_sales=order_gross_sales,
        discounts=round_to_one_decimal(order.discounts),
        taxes=round_to_one_decimal(order.taxes),
        shipping=round_to_one_decimal(order.shipping),
        sales=order_sales,
        total_cogs=order_cogs,
        gross_profit=order_profit,
        gross_margin=gross_margin(order_profit, order_sales),
    )


def analyze_orders(orders: Iterable[Order], catalog: Catalog) -> list[OrderAnalytics]:
    """Compute records for a batch of orders, indexing the catalog once."""
    products = index_catalog(catalog)
    return [order_analytics(order, products) for order in orders]


def portfolio_totals(records: Iterable[OrderAnalytics]) -> PortfolioTotals:
    """Sum per-order records and derive the portfolio-wide margin.

    The margin is total profit over total sales, not an average of the
    per-order margins.  With zero total sales it is ``None``.
    """
    records = list(records)

    def total(field_name: str) -> Decimal:
        return sum((getattr(r, field_name) for r in records), _ZERO)

    sum_sales = total("sales")
    sum_profit = total("gross_profit")

    if sum_sales == 0:
        logger.warning(
            "Portfolio gross margin undefined: total sales are zero across %d order(s)",
            len(records),
        )
        margin = None
    else:
        margin = round_to_one_decimal(sum_profit / sum_sales * _HUNDRED)

    return PortfolioTotals(
        order_count=len(records),
        gross_sales=total("gross_sales"),
        discounts=total("discounts"),
        taxes=total("taxes"),
        shipping=total("shipping"),
        sales=sum_sales,
        total_cogs=total("total_cogs"),
        gross_profit=sum_profit,
        gross_margin=margin,
    )


# --- Internal helpers ---------------------------------------------------------


def _resolve(
    line_items: Iterable[LineItem], products: Mapping[int, Product]
) -> Iterable[tuple[Product, LineItem]]:
    for item in line_items:
        product = products.get(item.product_id)
        if product is None:
            logger.debug("Skipping line item for unknown product %r", item.product_id)
            continue
        yield product, item
