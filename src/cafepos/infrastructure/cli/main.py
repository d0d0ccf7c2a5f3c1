import click

from cafepos.domain.exceptions import DomainException
from cafepos.infrastructure.cli.customer_commands import (
    customer_add,
    customer_list,
    customer_remove,
    customer_update,
)
from cafepos.infrastructure.cli.dashboard_commands import (
    dashboard_products,
    dashboard_stats,
    dashboard_summary,
)
from cafepos.infrastructure.cli.order_commands import (
    order_create,
    order_list,
    order_show,
    order_status,
)
from cafepos.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_remove,
    product_update,
)
from cafepos.infrastructure.config import get_config
from cafepos.infrastructure.logging import configure_logging


@click.group()
@click.option("--log-level", default=None, help="Override the configured log level.")
def cli(log_level: str | None) -> None:
    """cafepos: coffee shop point of sale"""
    configure_logging(log_level)


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage the menu."""


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.group()
def dashboard() -> None:
    """Sales reports."""


@cli.command("init-db")
def init_db() -> None:
    """Create tables (and the starter menu, if enabled)."""
    from cafepos.infrastructure.bootstrap import engine

    try:
        engine()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Database ready.")


@cli.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=3001, show_default=True, type=int)
def serve(host: str, port: int) -> None:
    """Run the HTTP API."""
    import uvicorn

    uvicorn.run(
        "cafepos.infrastructure.api.app:app",
        host=host,
        port=port,
        log_level=get_config().log_level.lower(),
    )


# Register subcommands
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_remove)
product.add_command(product_update)
customer.add_command(customer_add)
customer.add_command(customer_list)
customer.add_command(customer_remove)
customer.add_command(customer_update)
dashboard.add_command(dashboard_products)
dashboard.add_command(dashboard_stats)
dashboard.add_command(dashboard_summary)
