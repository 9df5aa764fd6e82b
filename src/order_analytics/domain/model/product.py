"""Product aggregate.

Products live independently of orders.  Orders reference them by id only,
so a price change is reflected the next time analytics are computed.
"""

from __future__ import annotations

from dataclasses import dataclass

from order_analytics.domain.exceptions import ValidationError
from order_analytics.domain.model.value_objects import Money, Number

TITLE_REQUIRED = "Title and category are required"
UNIT_PRICE_INVALID = "Unit price must be a number greater than 0"
COGS_INVALID = "COGS must be a number greater than 0"


def parse_price(value: Number, message: str) -> Money:
    """Coerce user input to Money, reporting any bad value with ``message``.

    Zero passes here and is rejected by ``Product.update`` with the same
    message.
    """
    try:
        return Money.of(value)
    except ValidationError as exc:
        raise ValidationError(message) from exc


@dataclass
class Product:
    """A product in the catalog.

    This is an aggregate root.  Kept as a mutable dataclass because
    editing title, category and pricing are legitimate mutations.
    """

    id: int
    title: str
    category: str
    unit_price: Money
    cogs: Money

    @staticmethod
    def create(
        product_id: int,
        title: str,
        category: str,
        unit_price: Money,
        cogs: Money,
    ) -> Product:
        """Build a new product, enforcing all catalog rules."""
        product = Product(
            id=product_id,
            title="",
            category="",
            unit_price=unit_price,
            cogs=cogs,
        )
        product.update(title, category, unit_price, cogs)
        return product

    def update(
        self,
        title: str,
        category: str,
        unit_price: Money,
        cogs: Money,
    ) -> None:
        """Replace the editable fields after validating them."""
        if not title or not title.strip() or not category or not category.strip():
            raise ValidationError(TITLE_REQUIRED)
        if not unit_price.is_positive:
            raise ValidationError(UNIT_PRICE_INVALID)
        if not cogs.is_positive:
            raise ValidationError(COGS_INVALID)

        self.title = title.strip()
        self.category = category.strip()
        self.unit_price = unit_price
        self.cogs = cogs
