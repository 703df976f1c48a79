"""CLI commands for admitting and viewing orders."""

from __future__ import annotations

import asyncio

import click
from returns.result import Failure

from order_admission.application.dto import OrderDTO, OrderLineRequest
from order_admission.application.show_order import ShowOrderHandler
from order_admission.domain.exceptions import (
    DomainException,
    InventoryInconsistencyError,
)
from order_admission.infrastructure.bootstrap import order_admission, order_repository


class InventoryInconsistencyException(click.ClickException):
    """Order stored, stock not decremented. Distinct exit code for scripts."""

    exit_code = 2


def _parse_items(raw: str) -> list[OrderLineRequest]:
    """Parse '1:3,2:5' into OrderLineRequest list."""
    specs: list[OrderLineRequest] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        if qty <= 0:
            raise click.BadParameter(
                f"Quantity for product '{product_id}' must be positive."
            )
        specs.append(OrderLineRequest(product_id=product_id.strip(), quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Customer: {dto.customer_name} ({dto.customer_id})")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'ID':<6} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*54}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_id:<6} {line.product_name:<20} {line.quantity:>5} "
            f"{'$' + format(line.price, '.2f'):>10} "
            f"{'$' + format(line.line_total, '.2f'):>10}"
        )
    click.echo(f"  {'-'*54}")
    click.echo(f"  {'Order Total':<34} {'$' + format(dto.total, '.2f'):>20}")


@click.command("create")
@click.option("--customer", "customer_id", required=True, help="Customer ID.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
def order_create(customer_id: str, items: str) -> None:
    """Admit a new order against current stock."""
    specs = _parse_items(items)
    admission = order_admission()

    try:
        result = asyncio.run(admission.execute(customer_id, specs))
    except InventoryInconsistencyError as exc:
        raise InventoryInconsistencyException(str(exc))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if isinstance(result, Failure):
        raise click.ClickException(str(result.failure()))

    dto = result.unwrap()
    click.echo(f"Order #{dto.id} created")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = asyncio.run(handler.handle(order_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id}")
    _display_order(dto)
