"""CLI commands for the product catalog."""

from __future__ import annotations

import asyncio

import click

from order_admission.application.add_product import AddProductHandler
from order_admission.application.set_stock import SetStockHandler
from order_admission.application.update_product import UpdateProductHandler
from order_admission.domain.exceptions import DomainException
from order_admission.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--quantity", default=0, show_default=True, type=int, help="Initial stock.")
def product_add(name: str, price: str, quantity: int) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = asyncio.run(handler.handle(name=name, price=price, quantity=quantity))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added at {product.price} "
        f"({product.quantity} in stock)"
    )


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = asyncio.run(product_repository().list_all())

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Stock':>8}")
    click.echo("-" * 47)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {str(p.price):>10} {p.quantity:>8}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
def product_update(product_id: str, price: str) -> None:
    """Update a product's price."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        asyncio.run(handler.handle(product_id=product_id, new_price=price))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} price updated to ${price}")


@click.command("restock")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Quantity on hand.")
def product_restock(product_id: str, quantity: int) -> None:
    """Set the stock level of a product."""
    handler = SetStockHandler(product_repo=product_repository())

    try:
        asyncio.run(handler.handle(product_id=product_id, quantity=quantity))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for product #{product_id} set to {quantity}")
