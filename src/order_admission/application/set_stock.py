"""Application service: Set Stock use case."""

from __future__ import annotations

from order_admission.domain.exceptions import EntityNotFoundError
from order_admission.domain.repository.product_repository import ProductRepository


class SetStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(self, product_id: str, quantity: int) -> None:
        """Set the quantity on hand for a product."""
        product = await self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        product.set_stock(quantity)
        await self._product_repo.save(product)
