"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from order_admission.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    async def create(self, order: Order) -> Order:
        """Persist a new order and return it with its assigned ID."""

    @abstractmethod
    async def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""
