"""Order aggregate.

An order owns its line items and three monetary adjustments.  Line items
hold a product id, not a price snapshot: analytics always use the current
catalog.  Adjustments are signed and are not validated here; they pass
straight through to the analytics calculator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from order_analytics.domain.model.value_objects import Number, Quantity, to_decimal


@dataclass(frozen=True)
class LineItem:
    """One product/quantity pairing within an order.

    ``quantity`` is a plain number.  ``Order.create`` checks it is positive;
    persisted orders are reconstituted exactly as stored.
    """

    product_id: int
    quantity: int | Decimal


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use ``Order.create()`` to build an order from plain numbers.  The
    ``__init__`` is kept simple so the repository can reconstitute
    persisted orders directly.
    """

    order_no: str
    line_items: list[LineItem] = field(default_factory=list)
    discounts: Decimal = Decimal("0")
    taxes: Decimal = Decimal("0")
    shipping: Decimal = Decimal("0")

    @staticmethod
    def create(
        order_no: str,
        line_items: list[tuple[int, Number]],
        discounts: Number = 0,
        taxes: Number = 0,
        shipping: Number = 0,
    ) -> Order:
        """Create an order from ``(product_id, quantity)`` pairs."""
        return Order(
            order_no=str(order_no),
            line_items=[
                LineItem(product_id=product_id, quantity=Quantity.of(qty).value)
                for product_id, qty in line_items
            ],
            discounts=to_decimal(discounts),
            taxes=to_decimal(taxes),
            shipping=to_decimal(shipping),
        )

    @property
    def item_count(self) -> int:
        return len(self.line_items)
