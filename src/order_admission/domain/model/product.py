"""Product aggregate: a catalog entry with a price and stock on hand.

The admission reads a snapshot of these and never mutates the snapshot
objects; new quantities are applied by handing fresh copies back to the
catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from order_admission.domain.exceptions import ValidationError
from order_admission.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Invariant: ``quantity`` is never negative.
    """

    id: str
    name: str
    price: Money
    quantity: int = 0

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValidationError(
                f"Stock for {self.name} cannot be negative, got {self.quantity}"
            )

    def can_supply(self, requested: int) -> bool:
        """True when ``requested`` units can be taken from current stock."""
        return self.quantity != 0 and self.quantity >= requested

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        Existing orders are unaffected: each line froze its price at
        admission time.
        """
        self.price = new_price

    def set_stock(self, quantity: int) -> None:
        if quantity < 0:
            raise ValidationError(f"Stock for {self.name} cannot be negative")
        self.quantity = quantity

    def with_quantity(self, quantity: int) -> Product:
        """Return a copy carrying ``quantity`` as its stock."""
        return replace(self, quantity=quantity)
