"""JSON-file-backed implementation of OrderRepository.

Orders are stored with a copy of the customer record and the frozen
line prices, so later catalog or customer edits never alter them.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from order_admission.domain.model.customer import Customer
from order_admission.domain.model.order import Order, OrderLine
from order_admission.domain.model.value_objects import Money, Quantity
from order_admission.domain.repository.order_repository import OrderRepository
from order_admission.infrastructure.persistence.json_store import JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- OrderRepository interface --------------------------------------------

    async def create(self, order: Order) -> Order:
        orders = self._file.load()
        next_id = max((o["id"] for o in orders), default=0) + 1
        stored = order.with_id(next_id)
        orders.append(self._to_raw(stored))
        self._file.persist(orders)
        return stored

    async def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._file.load():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer": {
                "id": order.customer.id,
                "name": order.customer.name,
                "email": order.customer.email,
            },
            "created_at": order.created_at.isoformat(),
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity.value,
                    "price": str(item.price.amount),
                    "currency": item.price.currency,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = tuple(
            OrderLine(
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=Quantity(i["quantity"]),
                price=Money(Decimal(i["price"]), i.get("currency", "USD")),
            )
            for i in raw["items"]
        )
        customer = raw["customer"]
        return Order(
            id=raw["id"],
            customer=Customer(
                id=customer["id"],
                name=customer["name"],
                email=customer.get("email", ""),
            ),
            items=items,
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
