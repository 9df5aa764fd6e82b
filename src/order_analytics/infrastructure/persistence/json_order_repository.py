"""JSON-file-backed implementation of OrderRepository.

Orders are read verbatim: line items pointing at products that no longer
exist are kept as they are, and stored quantities are not re-validated.
"""

from __future__ import annotations

from decimal import Decimal

from order_analytics.domain.model.order import LineItem, Order
from order_analytics.domain.model.value_objects import Number, to_decimal
from order_analytics.domain.repository.order_repository import OrderRepository
from order_analytics.infrastructure.persistence.json_data_file import JsonDataFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, data_file: JsonDataFile) -> None:
        self._data_file = data_file

    # --- OrderRepository interface --------------------------------------------

    def get_by_order_no(self, order_no: str) -> Order | None:
        for raw in self._data_file.read_section("orders"):
            if str(raw["orderNo"]) == order_no:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._data_file.read_section("orders")]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        return Order(
            order_no=str(raw["orderNo"]),
            line_items=[
                LineItem(product_id=i["productId"], quantity=_quantity(i["quantity"]))
                for i in raw.get("lineItems", [])
            ],
            discounts=to_decimal(raw.get("discounts", 0)),
            taxes=to_decimal(raw.get("taxes", 0)),
            shipping=to_decimal(raw.get("shipping", 0)),
        )


def _quantity(value: Number) -> int | Decimal:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return to_decimal(value)
