"""Abstract repository for Customer records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from order_admission.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    async def find_by_id(self, customer_id: str) -> Customer | None:
        """Return the customer with this id, or None."""

    @abstractmethod
    async def list_all(self) -> list[Customer]:
        """Return every customer."""

    @abstractmethod
    async def save(self, customer: Customer) -> None:
        """Persist a new or updated customer."""
