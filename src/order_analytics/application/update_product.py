"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from order_analytics.domain.exceptions import EntityNotFoundError
from order_analytics.domain.model.product import (
    COGS_INVALID,
    UNIT_PRICE_INVALID,
    Product,
    parse_price,
)
from order_analytics.domain.model.value_objects import Number
from order_analytics.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: int,
        title: str | None = None,
        category: str | None = None,
        unit_price: Number | None = None,
        cogs: Number | None = None,
    ) -> Product:
        """Edit a product.  Fields left as None keep their current value.

        Orders reference products by ID, so the next analytics run picks
        up the new pricing for every order containing this product.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if unit_price is not None:
            unit_price = parse_price(unit_price, UNIT_PRICE_INVALID)
        if cogs is not None:
            cogs = parse_price(cogs, COGS_INVALID)

        product.update(
            title=product.title if title is None else title,
            category=product.category if category is None else category,
            unit_price=product.unit_price if unit_price is None else unit_price,
            cogs=product.cogs if cogs is None else cogs,
        )
        self._product_repo.save(product)
        logger.info("Updated product #%d", product.id)
        return product
