"""Application service: Add Customer use case."""

from __future__ import annotations

import uuid

from order_admission.domain.exceptions import ValidationError
from order_admission.domain.model.customer import Customer
from order_admission.domain.repository.customer_repository import CustomerRepository


class AddCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    async def handle(self, name: str, email: str = "") -> Customer:
        if not name or not name.strip():
            raise ValidationError("Customer name is required")

        customer = Customer(id=str(uuid.uuid4()), name=name.strip(), email=email.strip())
        await self._customer_repo.save(customer)
        return customer
