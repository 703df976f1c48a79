"""JSON-file-backed implementation of CustomerRepository."""

from __future__ import annotations

from pathlib import Path

from order_admission.domain.model.customer import Customer
from order_admission.domain.repository.customer_repository import CustomerRepository
from order_admission.infrastructure.persistence.json_store import JsonFile


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    async def find_by_id(self, customer_id: str) -> Customer | None:
        for raw in self._file.load():
            if raw["id"] == customer_id:
                return self._to_domain(raw)
        return None

    async def list_all(self) -> list[Customer]:
        return [self._to_domain(raw) for raw in self._file.load()]

    async def save(self, customer: Customer) -> None:
        records = [raw for raw in self._file.load() if raw["id"] != customer.id]
        records.append(
            {"id": customer.id, "name": customer.name, "email": customer.email}
        )
        self._file.persist(records)

    @staticmethod
    def _to_domain(raw: dict) -> Customer:
        return Customer(id=raw["id"], name=raw["name"], email=raw.get("email", ""))
