"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from order_analytics.infrastructure.config import Settings
from order_analytics.infrastructure.persistence.json_data_file import JsonDataFile
from order_analytics.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from order_analytics.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def data_file(path: Path | None = None) -> JsonDataFile:
    return JsonDataFile(path or Settings.from_env().data_file)


def product_repository(path: Path | None = None) -> JsonProductRepository:
    return JsonProductRepository(data_file(path))


def order_repository(path: Path | None = None) -> JsonOrderRepository:
    return JsonOrderRepository(data_file(path))
