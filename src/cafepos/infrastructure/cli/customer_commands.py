"""CLI commands for customer records."""

from __future__ import annotations

import click

from cafepos.application.add_customer import AddCustomerHandler
from cafepos.application.dto import CustomerChanges
from cafepos.application.remove_customer import RemoveCustomerHandler
from cafepos.application.show_customers import ShowCustomersHandler
from cafepos.application.update_customer import UpdateCustomerHandler
from cafepos.domain.exceptions import DomainException
from cafepos.domain.model.value_objects import UNSET
from cafepos.infrastructure.bootstrap import customer_repository


@click.command("list")
def customer_list() -> None:
    """List customers by name."""
    try:
        customers = ShowCustomersHandler(customer_repo=customer_repository()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Phone':<16} {'Email'}")
    click.echo("-" * 70)
    for c in customers:
        click.echo(f"{c.id:<6} {c.name:<24} {c.phone or '':<16} {c.email or ''}")


@click.command("add")
@click.option("--name", required=True, help="Customer name.")
@click.option("--phone", default=None, help="Phone number.")
@click.option("--email", default=None, help="Email address (must be unique).")
def customer_add(name: str, phone: str | None, email: str | None) -> None:
    """Register a customer."""
    try:
        handler = AddCustomerHandler(customer_repo=customer_repository())
        customer = handler.handle(name=name, phone=phone, email=email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer #{customer.id} '{customer.name}' added")


@click.command("update")
@click.option("--id", "customer_id", required=True, type=int, help="Customer ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--phone", default=None, help="New phone; pass '' to clear.")
@click.option("--email", default=None, help="New email; pass '' to clear.")
def customer_update(
    customer_id: int, name: str | None, phone: str | None, email: str | None
) -> None:
    """Update selected fields of a customer."""
    changes = CustomerChanges(
        name=UNSET if name is None else name,
        phone=UNSET if phone is None else (phone or None),
        email=UNSET if email is None else (email or None),
    )
    try:
        handler = UpdateCustomerHandler(customer_repo=customer_repository())
        customer = handler.handle(customer_id, changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer #{customer.id} updated")


@click.command("remove")
@click.option("--id", "customer_id", required=True, type=int, help="Customer ID.")
def customer_remove(customer_id: int) -> None:
    """Delete a customer record."""
    try:
        RemoveCustomerHandler(customer_repo=customer_repository()).handle(customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer #{customer_id} removed")
