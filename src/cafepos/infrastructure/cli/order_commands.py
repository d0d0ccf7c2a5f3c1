"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from cafepos.application.create_order import CreateOrderHandler
from cafepos.application.dto import OrderDTO, OrderItemSpec
from cafepos.application.list_orders import ListOrdersHandler
from cafepos.application.show_order import ShowOrderHandler
from cafepos.application.update_order_status import UpdateOrderStatusHandler
from cafepos.domain.exceptions import DomainException
from cafepos.domain.model.order import OrderStatus, OrderType
from cafepos.domain.repository.product_repository import ProductRepository
from cafepos.infrastructure.bootstrap import (
    clock,
    order_repository,
    product_repository,
)


def _parse_item(raw: str) -> tuple[int, int]:
    """Parse '3:2' (product id : quantity) into a tuple."""
    if ":" not in raw:
        raise click.BadParameter(
            f"Invalid item format '{raw}'. Expected 'ProductID:Quantity'."
        )
    id_str, qty_str = raw.split(":", 1)
    try:
        return int(id_str), int(qty_str)
    except ValueError:
        raise click.BadParameter(
            f"Invalid item '{raw}'. Product ID and quantity must be integers."
        )


def _resolve_items(
    raw_items: tuple[str, ...], product_repo: ProductRepository
) -> list[OrderItemSpec]:
    """Look up each product so the order captures today's name and price."""
    specs: list[OrderItemSpec] = []
    for raw in raw_items:
        product_id, qty = _parse_item(raw)
        product = product_repo.get_by_id(product_id)
        if product is None:
            raise click.ClickException(f"Product not found: {product_id}")
        specs.append(
            OrderItemSpec(
                product_id=product.id,
                product_name=product.name,
                quantity=qty,
                unit_price=product.price.amount,
            )
        )
    return specs


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order {dto.id}  (status={dto.status}, type={dto.order_type})")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Created:  {dto.created_at:%Y-%m-%d %H:%M UTC}")
    if dto.notes:
        click.echo(f"Notes:    {dto.notes}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*51}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<24} {item.quantity:>5} "
            f"{'$' + format(item.unit_price, '.2f'):>10} "
            f"{'$' + format(item.line_total, '.2f'):>10}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Order Total':<31} {'$' + format(dto.total, '.2f'):>20}")


@click.command("create")
@click.option("--customer", required=True, help="Customer name.")
@click.option(
    "--item", "items", multiple=True, required=True,
    help="Item as 'ProductID:Qty'. Repeat for more items.",
)
@click.option(
    "--type", "order_type",
    type=click.Choice([t.value for t in OrderType]),
    default=OrderType.DINE_IN.value, show_default=True,
    help="Order type.",
)
@click.option("--notes", default="", help="Free-text notes for the kitchen.")
def order_create(customer: str, items: tuple[str, ...], order_type: str, notes: str) -> None:
    """Create a new order from catalog products."""
    try:
        specs = _resolve_items(items, product_repository())
        handler = CreateOrderHandler(order_repo=order_repository(), clock=clock())
        created = handler.handle(
            customer_name=customer,
            item_specs=specs,
            order_type=order_type,
            notes=notes,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {created.id} created  (total=${created.total:.2f})")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""
    try:
        handler = ShowOrderHandler(order_repo=order_repository())
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
def order_list() -> None:
    """List all orders, newest first."""
    try:
        summaries = ListOrdersHandler(order_repo=order_repository()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not summaries:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<38} {'Customer':<20} {'Status':<10} {'Items':>5} {'Total':>10}")
    click.echo("-" * 87)
    for s in summaries:
        click.echo(
            f"{s.id:<38} {s.customer_name:<20} {s.status:<10} "
            f"{s.item_count:>5} {'$' + format(s.total, '.2f'):>10}"
        )


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option(
    "--status", required=True,
    type=click.Choice([s.value for s in OrderStatus]),
    help="New status.",
)
def order_status(order_id: str, status: str) -> None:
    """Move an order to a new status."""
    try:
        handler = UpdateOrderStatusHandler(order_repo=order_repository())
        change = handler.handle(order_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {change.order_id} is now {change.status}.")
