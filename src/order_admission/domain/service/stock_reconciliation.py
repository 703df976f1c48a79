"""Domain service: reconcile requested order lines against a catalog snapshot.

Pure functions, no I/O. The admission use case feeds them one catalog
snapshot and the caller's requested lines; nothing here mutates either.

Reporting order matters: wherever a rule can match several products, the
result follows catalog iteration order so the first element is the one a
rejection names.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from order_admission.domain.model.order import OrderLine
from order_admission.domain.model.product import Product
from order_admission.domain.model.value_objects import Quantity


class RequestedLine(Protocol):
    product_id: str
    quantity: int


def remove_duplicate_lines(lines: Sequence[RequestedLine]) -> list[RequestedLine]:
    """Collapse lines by product id; the first occurrence wins."""
    kept: dict[str, RequestedLine] = {}
    for line in lines:
        if line.product_id not in kept:
            kept[line.product_id] = line
    return list(kept.values())


def find_invalid_products(
    catalog: Sequence[Product], lines: Sequence[RequestedLine]
) -> list[str]:
    """Product ids that cannot be matched between the catalog and the request.

    Catalog entries nobody asked for come first, in catalog order, followed
    by requested ids the catalog does not know, in request order.
    """
    requested = {line.product_id for line in lines}
    known = {product.id for product in catalog}

    unmatched = [product.id for product in catalog if product.id not in requested]
    missing = [line.product_id for line in lines if line.product_id not in known]
    return unmatched + missing


def find_stockout_products(
    catalog: Sequence[Product], lines: Sequence[RequestedLine]
) -> list[str]:
    """Product ids whose stock is zero or below the requested quantity."""
    wanted = {line.product_id: line.quantity for line in lines}
    return [
        product.id
        for product in catalog
        if product.id in wanted and not product.can_supply(wanted[product.id])
    ]


def snapshot_lines(
    catalog: Sequence[Product], lines: Sequence[RequestedLine]
) -> list[OrderLine]:
    """Build order lines in request order, freezing the current catalog price."""
    by_id = {product.id: product for product in catalog}
    result: list[OrderLine] = []
    for line in lines:
        product = by_id[line.product_id]
        result.append(
            OrderLine(
                product_id=product.id,
                product_name=product.name,
                quantity=Quantity(line.quantity),
                price=product.price,
            )
        )
    return result


def decrement_stock(
    catalog: Sequence[Product], lines: Sequence[RequestedLine]
) -> list[Product]:
    """Copies of the ordered catalog entries with the requested units taken out.

    Entries that were not ordered are left out of the result entirely.
    """
    wanted = {line.product_id: line.quantity for line in lines}
    return [
        product.with_quantity(product.quantity - wanted[product.id])
        for product in catalog
        if product.id in wanted
    ]
