"""CLI commands for dashboard reports."""

from __future__ import annotations

from datetime import datetime

import click

from cafepos.application.dashboard_summary import DashboardSummaryHandler
from cafepos.application.order_stats import OrderStatsHandler
from cafepos.application.product_performance import ProductPerformanceHandler
from cafepos.domain.exceptions import DomainException
from cafepos.infrastructure.bootstrap import (
    clock,
    order_repository,
    product_repository,
)
from cafepos.infrastructure.config import get_config


def _money(amount) -> str:
    return f"${amount:.2f}"


@click.command("summary")
def dashboard_summary() -> None:
    """Today's figures, the weekly trend and best sellers."""
    config = get_config()
    try:
        handler = DashboardSummaryHandler(
            order_repo=order_repository(),
            product_repo=product_repository(),
            clock=clock(),
            recent_limit=config.recent_orders_limit,
            trend_days=config.revenue_trend_days,
            popular_window_days=config.popular_window_days,
            popular_limit=config.top_products_limit,
        )
        summary = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Orders today:      {summary.today_orders}")
    click.echo(f"Revenue today:     {_money(summary.today_revenue)}")
    click.echo(f"Pending orders:    {summary.pending_orders}")
    click.echo(f"Products on menu:  {summary.total_products}")

    click.echo()
    click.echo("Revenue trend")
    for day in summary.weekly_revenue:
        click.echo(f"  {day.date.isoformat()}  {day.order_count:>4} orders  {_money(day.revenue):>10}")

    click.echo()
    click.echo("Popular products")
    if not summary.popular_products:
        click.echo("  (no sales yet)")
    for p in summary.popular_products:
        click.echo(f"  {p.product_name:<26} {p.total_sold:>5} sold in {p.order_count} orders")

    click.echo()
    click.echo("Recent orders")
    for o in summary.recent_orders:
        click.echo(f"  {o.id}  {o.customer_name:<20} {o.status:<10} {_money(o.total):>10}")


@click.command("stats")
@click.option("--start", "start_date", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
              help="First day to include (YYYY-MM-DD).")
@click.option("--end", "end_date", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
              help="Last day to include (YYYY-MM-DD).")
def dashboard_stats(start_date: datetime | None, end_date: datetime | None) -> None:
    """Per-day order count, revenue and average order value."""
    try:
        handler = OrderStatsHandler(order_repo=order_repository(), clock=clock())
        rows = handler.handle(
            start_date=start_date.date() if start_date else None,
            end_date=end_date.date() if end_date else None,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not rows:
        click.echo("No orders in range.")
        return

    click.echo(f"{'Date':<12} {'Orders':>7} {'Revenue':>12} {'Avg':>10}")
    click.echo("-" * 44)
    for r in rows:
        click.echo(
            f"{r.date.isoformat():<12} {r.order_count:>7} "
            f"{_money(r.revenue):>12} {_money(r.avg_order_value):>10}"
        )


@click.command("products")
@click.option("--limit", type=click.IntRange(min=1), default=None,
              help="Number of products to show.")
def dashboard_products(limit: int | None) -> None:
    """Sales per available product over the trailing window."""
    config = get_config()
    try:
        handler = ProductPerformanceHandler(
            order_repo=order_repository(),
            product_repo=product_repository(),
            clock=clock(),
            window_days=config.popular_window_days,
        )
        rows = handler.handle(limit or config.performance_default_limit)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{'ID':<5} {'Name':<26} {'Sold':>6} {'Revenue':>12} {'Orders':>7}")
    click.echo("-" * 60)
    for r in rows:
        click.echo(
            f"{r.id:<5} {r.name:<26} {r.total_sold:>6} "
            f"{_money(r.total_revenue):>12} {r.order_count:>7}"
        )
