"""Application service: List Orders use case (query)."""

from __future__ import annotations

from order_analytics.application.dto import OrderSummaryDTO
from order_analytics.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> list[OrderSummaryDTO]:
        return [
            OrderSummaryDTO(
                order_no=order.order_no,
                item_count=order.item_count,
                discounts=order.discounts,
                taxes=order.taxes,
                shipping=order.shipping,
            )
            for order in self._order_repo.list_all()
        ]
