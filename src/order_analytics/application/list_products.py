"""Application service: List Products use case (query)."""

from __future__ import annotations

from order_analytics.application.dto import ProductDTO
from order_analytics.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDTO]:
        return [
            ProductDTO(
                id=p.id,
                title=p.title,
                category=p.category,
                unit_price=str(p.unit_price),
                cogs=str(p.cogs),
            )
            for p in self._product_repo.list_all()
        ]
