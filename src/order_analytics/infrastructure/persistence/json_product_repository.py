"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from order_analytics.domain.model.product import Product
from order_analytics.domain.model.value_objects import Money
from order_analytics.domain.repository.product_repository import ProductRepository
from order_analytics.infrastructure.persistence.json_data_file import JsonDataFile


class JsonProductRepository(ProductRepository):

    def __init__(self, data_file: JsonDataFile) -> None:
        self._data_file = data_file

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> int:
        records = self._data_file.read_section("products")
        if not records:
            return 1
        return max(int(raw["id"]) for raw in records) + 1

    def get_by_id(self, product_id: int) -> Product | None:
        for raw in self._data_file.read_section("products"):
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._data_file.read_section("products")]

    def save(self, product: Product) -> None:
        records = self._data_file.read_section("products")

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(records):
            if raw["id"] == product.id:
                records[i] = {**raw, **self._to_raw(product)}
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(product))

        self._data_file.write_section("products", records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "title": product.title,
            "category": product.category,
            "unitPrice": product.unit_price.amount,
            "cogs": product.cogs.amount,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            title=raw["title"],
            category=raw["category"],
            unit_price=Money.of(raw["unitPrice"]),
            cogs=Money.of(raw["cogs"]),
        )
