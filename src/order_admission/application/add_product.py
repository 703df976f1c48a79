"""Application service: Add Product use case."""

from __future__ import annotations

from order_admission.domain.exceptions import ValidationError
from order_admission.domain.model.product import Product
from order_admission.domain.model.value_objects import Money
from order_admission.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(self, name: str, price: str, quantity: int = 0) -> Product:
        """Add a new product to the catalog with an initial stock level."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        all_products = await self._product_repo.list_all()
        if any(p.name.lower() == name.strip().lower() for p in all_products):
            raise ValidationError(f"Product '{name}' already exists")

        # Auto-assign ID based on existing numeric IDs
        next_id = str(
            max((int(p.id) for p in all_products if p.id.isdigit()), default=0) + 1
        )

        product = Product(
            id=next_id,
            name=name.strip(),
            price=Money.of(price),
            quantity=quantity,
        )
        await self._product_repo.save(product)
        return product
