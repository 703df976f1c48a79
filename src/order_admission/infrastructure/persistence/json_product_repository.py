"""JSON-file-backed implementation of ProductRepository.

Records keep their file order, which is the catalog iteration order
reported by ``find_all_by_id``.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from pathlib import Path

from order_admission.domain.exceptions import EntityNotFoundError
from order_admission.domain.model.product import Product
from order_admission.domain.model.value_objects import Money
from order_admission.domain.repository.product_repository import ProductRepository
from order_admission.infrastructure.persistence.json_store import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- ProductRepository interface ------------------------------------------

    async def find_all_by_id(self, product_ids: Iterable[str]) -> list[Product]:
        wanted = set(product_ids)
        return [p for p in self._load().values() if p.id in wanted]

    async def update_quantities(self, products: list[Product]) -> None:
        current = self._load()
        for product in products:
            if product.id not in current:
                raise EntityNotFoundError(
                    f"Product with ID '{product.id}' not found"
                )
            current[product.id].quantity = product.quantity
        self._persist(current)

    async def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    async def list_all(self) -> list[Product]:
        return list(self._load().values())

    async def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                price=Money(Decimal(item["price"]), item.get("currency", "USD")),
                quantity=item.get("quantity", 0),
            )
            for item in self._file.load()
        }

    def _persist(self, products: dict[str, Product]) -> None:
        self._file.persist(
            [
                {
                    "id": p.id,
                    "name": p.name,
                    "price": str(p.price.amount),
                    "currency": p.price.currency,
                    "quantity": p.quantity,
                }
                for p in products.values()
            ]
        )
