"""Order aggregate.

An Order is created exactly once, by a successful admission, and is
immutable afterwards. Each line carries the catalog price that was in
effect when the order was admitted.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from order_admission.domain.exceptions import ValidationError
from order_admission.domain.model.customer import Customer
from order_admission.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class OrderLine:
    """One product on an order, with its price locked at admission time."""

    product_id: str
    product_name: str
    quantity: Quantity
    price: Money

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value


@dataclass(frozen=True)
class Order:
    """Aggregate root for admitted orders.

    Use ``Order.create()`` for new orders. ``id`` stays ``None`` until the
    order store assigns one; the plain constructor lets repositories
    reconstitute stored orders without re-validating.
    """

    id: int | None
    customer: Customer
    items: tuple[OrderLine, ...]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(customer: Customer, lines: list[OrderLine]) -> Order:
        """Create a new, not yet persisted order."""
        if not lines:
            raise ValidationError("Order must contain at least one item")

        seen: set[str] = set()
        for line in lines:
            if line.product_id in seen:
                raise ValidationError(
                    f"Product '{line.product_id}' appears more than once"
                )
            seen.add(line.product_id)

        return Order(id=None, customer=customer, items=tuple(lines))

    def with_id(self, order_id: int) -> Order:
        return replace(self, id=order_id)

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result
