"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from order_analytics.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_order_no(self, order_no: str) -> Order | None:
        """Return an order by its number, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order in storage order."""
