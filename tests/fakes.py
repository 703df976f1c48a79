"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from order_admission.domain.model.customer import Customer
from order_admission.domain.model.order import Order
from order_admission.domain.model.product import Product
from order_admission.domain.repository.customer_repository import CustomerRepository
from order_admission.domain.repository.order_repository import OrderRepository
from order_admission.domain.repository.product_repository import ProductRepository


class FakeCustomerRepository(CustomerRepository):

    def __init__(self, customers: list[Customer] | None = None) -> None:
        self._store: dict[str, Customer] = {}
        for c in customers or []:
            self._store[c.id] = c

    async def find_by_id(self, customer_id: str) -> Customer | None:
        return self._store.get(customer_id)

    async def list_all(self) -> list[Customer]:
        return list(self._store.values())

    async def save(self, customer: Customer) -> None:
        self._store[customer.id] = customer


class FakeProductRepository(ProductRepository):
    """Catalog fake. Hands out copies so callers can't mutate stored stock.

    Set ``fail_updates`` to make ``update_quantities`` raise, simulating a
    catalog outage after the order was stored.
    """

    def __init__(
        self,
        products: list[Product] | None = None,
        fail_updates: bool = False,
    ) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p
        self.fail_updates = fail_updates
        self.update_calls: list[list[Product]] = []

    async def find_all_by_id(self, product_ids: Iterable[str]) -> list[Product]:
        wanted = set(product_ids)
        return [replace(p) for p in self._store.values() if p.id in wanted]

    async def update_quantities(self, products: list[Product]) -> None:
        if self.fail_updates:
            raise ConnectionError("catalog unavailable")
        self.update_calls.append(list(products))
        for product in products:
            self._store[product.id].quantity = product.quantity

    async def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    async def list_all(self) -> list[Product]:
        return list(self._store.values())

    async def save(self, product: Product) -> None:
        self._store[product.id] = product

    def quantity_of(self, product_id: str) -> int:
        return self._store[product_id].quantity


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1

    async def create(self, order: Order) -> Order:
        stored = order.with_id(self._next_id)
        self._next_id += 1
        self._store[stored.id] = stored
        return stored

    async def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def count(self) -> int:
        return len(self._store)
