import click

from order_admission.infrastructure.cli.customer_commands import (
    customer_add,
    customer_list,
)
from order_admission.infrastructure.cli.order_commands import order_create, order_show
from order_admission.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_restock,
    product_update,
)
from order_admission.infrastructure.logging import configure_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Debug logging.")
def cli(verbose: bool) -> None:
    """Order admission against a stocked product catalog."""
    configure_logging(verbose=verbose)


@cli.group()
def order() -> None:
    """Admit and inspect orders."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def customer() -> None:
    """Manage customers."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
product.add_command(product_restock)
customer.add_command(customer_add)
customer.add_command(customer_list)
