"""Application service: Update Product use case."""

from __future__ import annotations

from order_admission.domain.exceptions import EntityNotFoundError
from order_admission.domain.model.value_objects import Money
from order_admission.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(self, product_id: str, new_price: str) -> None:
        """Update a product's price.

        Orders admitted earlier keep the price they were admitted at.
        """
        product = await self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        product.update_price(Money.of(new_price))
        await self._product_repo.save(product)
