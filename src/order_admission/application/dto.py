"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from order_admission.domain.model.order import Order


@dataclass(frozen=True)
class OrderLineRequest:
    """Input: what the customer asked for (product id + quantity)."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a single admitted line with its frozen price."""

    product_id: str
    product_name: str
    quantity: int
    price: Decimal
    line_total: Decimal


@dataclass(frozen=True)
class OrderDTO:
    """Output: an admitted order.

    The stored aggregate keeps its lines under ``items``; the public view
    calls them ``lines``.
    """

    id: int
    customer_id: str
    customer_name: str
    lines: list[OrderLineDTO]
    total: Decimal
    created_at: str

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            customer_id=order.customer.id,
            customer_name=order.customer.name,
            lines=[
                OrderLineDTO(
                    product_id=item.product_id,
                    product_name=item.product_name,
                    quantity=item.quantity.value,
                    price=item.price.amount,
                    line_total=item.line_total.amount,
                )
                for item in order.items
            ],
            total=order.total.amount,
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )
