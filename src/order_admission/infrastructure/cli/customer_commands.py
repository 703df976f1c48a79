"""CLI commands for customers."""

from __future__ import annotations

import asyncio

import click

from order_admission.application.add_customer import AddCustomerHandler
from order_admission.domain.exceptions import DomainException
from order_admission.infrastructure.bootstrap import customer_repository


@click.command("add")
@click.option("--name", required=True, help="Customer name.")
@click.option("--email", default="", help="Contact e-mail.")
def customer_add(name: str, email: str) -> None:
    """Register a customer."""
    handler = AddCustomerHandler(customer_repo=customer_repository())

    try:
        customer = asyncio.run(handler.handle(name=name, email=email))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer '{customer.name}' added with ID {customer.id}")


@click.command("list")
def customer_list() -> None:
    """List registered customers."""
    customers = asyncio.run(customer_repository().list_all())

    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<38} {'Name':<20} {'Email'}")
    click.echo("-" * 80)
    for c in customers:
        click.echo(f"{c.id:<38} {c.name:<20} {c.email}")
