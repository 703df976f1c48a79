"""Abstract repository for the Product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer and the test suite.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from order_admission.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    async def find_all_by_id(self, product_ids: Iterable[str]) -> list[Product]:
        """Return the catalog entries whose id is in ``product_ids``.

        Entries come back in catalog order, each at most once, regardless
        of how often an id is repeated in the argument. Unknown ids are
        silently skipped.
        """

    @abstractmethod
    async def update_quantities(self, products: list[Product]) -> None:
        """Overwrite the stock of each given product in one batch."""

    @abstractmethod
    async def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    async def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    async def save(self, product: Product) -> None:
        """Persist a new or updated product."""
