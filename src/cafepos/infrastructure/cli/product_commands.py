"""CLI commands for the Product catalog."""

from __future__ import annotations

import click

from cafepos.application.add_product import AddProductHandler
from cafepos.application.dto import ProductChanges
from cafepos.application.remove_product import RemoveProductHandler
from cafepos.application.show_products import ShowProductsHandler
from cafepos.application.update_product import UpdateProductHandler
from cafepos.domain.exceptions import DomainException
from cafepos.domain.model.value_objects import UNSET
from cafepos.infrastructure.bootstrap import product_repository


@click.command("list")
def product_list() -> None:
    """List available products by category."""
    try:
        products = ShowProductsHandler(product_repo=product_repository()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<26} {'Category':<12} {'Price':>10}")
    click.echo("-" * 57)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<26} {p.category:<12} {str(p.price):>10}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", required=True, help="Short description.")
@click.option("--price", required=True, help="Price (e.g. 3.50).")
@click.option("--category", required=True, help="Menu category.")
@click.option("--unavailable", is_flag=True, default=False, help="Add as unavailable.")
def product_add(
    name: str, description: str, price: str, category: str, unavailable: bool
) -> None:
    """Add a new product to the menu."""
    try:
        handler = AddProductHandler(product_repo=product_repository())
        product = handler.handle(
            name=name,
            description=description,
            price=price,
            category=category,
            available=not unavailable,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option("--price", default=None, help="New price (e.g. 4.25).")
@click.option("--category", default=None, help="New category.")
@click.option("--available/--unavailable", default=None, help="Availability.")
def product_update(
    product_id: int,
    name: str | None,
    description: str | None,
    price: str | None,
    category: str | None,
    available: bool | None,
) -> None:
    """Update selected fields of a product."""
    changes = ProductChanges(
        name=UNSET if name is None else name,
        description=UNSET if description is None else description,
        price=UNSET if price is None else price,
        category=UNSET if category is None else category,
        available=UNSET if available is None else available,
    )
    try:
        handler = UpdateProductHandler(product_repo=product_repository())
        product = handler.handle(product_id, changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} updated")


@click.command("remove")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_remove(product_id: int) -> None:
    """Remove a product from the menu (past orders are unaffected)."""
    try:
        RemoveProductHandler(product_repo=product_repository()).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} removed")
