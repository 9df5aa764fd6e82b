"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from order_analytics.domain.model.product import (
    COGS_INVALID,
    UNIT_PRICE_INVALID,
    Product,
    parse_price,
)
from order_analytics.domain.model.value_objects import Number
from order_analytics.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        title: str,
        category: str,
        unit_price: Number,
        cogs: Number,
    ) -> Product:
        """Add a new product to the catalog under the next free ID."""
        product = Product.create(
            product_id=self._product_repo.next_id(),
            title=title,
            category=category,
            unit_price=parse_price(unit_price, UNIT_PRICE_INVALID),
            cogs=parse_price(cogs, COGS_INVALID),
        )
        self._product_repo.save(product)
        logger.info("Added product #%d %r", product.id, product.title)
        return product
