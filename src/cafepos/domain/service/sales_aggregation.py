"""Domain service: Sales Aggregation.

Rolls order headers and sold line items up into per-day totals and
per-product rankings.  All grouping happens here, in Python, over rows
the repository has already filtered by time window:

  * calendar dates are taken in the clock's reference time zone, not
    in the storage engine's notion of "date";
  * every monetary sum is an exact ``Decimal`` addition of cent-precise
    ``Money`` values, so there is no drift however many rows are summed.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

from cafepos.domain.clock import Clock
from cafepos.domain.model.order import OrderSummary
from cafepos.domain.model.product import Product
from cafepos.domain.model.sales import (
    DailyTotal,
    ProductPerformance,
    ProductSales,
    SoldItem,
)
from cafepos.domain.model.value_objects import Money


@dataclass
class _Tally:
    quantity: int = 0
    revenue: Money = field(default_factory=Money.zero)
    order_ids: set[str] = field(default_factory=set)

    def add(self, item: SoldItem, *, in_window: bool = True) -> None:
        self.order_ids.add(item.order_id)
        if in_window:
            self.quantity += item.quantity
            self.revenue = self.revenue + item.line_total


class SalesAggregationService:

    def __init__(self, clock: Clock) -> None:
        self._clock = clock

    # --- Time windows ---------------------------------------------------------

    def trailing_window_start(self, days: int) -> datetime:
        """Start of the trailing window ``[now - days, now]``."""
        return self._clock.now() - timedelta(days=days)

    def trailing_dates(self, days: int) -> list[date]:
        """The last *days* calendar dates, oldest first, ending today."""
        today = self._clock.today()
        return [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]

    # --- Per-day totals -------------------------------------------------------

    def daily_totals(self, orders: Iterable[OrderSummary]) -> list[DailyTotal]:
        """Group orders by local creation date; only dates with orders appear."""
        counts: dict[date, int] = {}
        revenue: dict[date, Money] = {}
        for order in orders:
            day = self._clock.local_date(order.created_at)
            counts[day] = counts.get(day, 0) + 1
            revenue[day] = revenue.get(day, Money.zero()) + order.total_amount
        return [
            DailyTotal(day=day, order_count=counts[day], revenue=revenue[day])
            for day in sorted(counts)
        ]

    def daily_series(
        self, orders: Iterable[OrderSummary], days: list[date]
    ) -> list[DailyTotal]:
        """Totals for exactly the given *days*, zero-filling empty ones."""
        by_day = {total.day: total for total in self.daily_totals(orders)}
        return [
            by_day.get(day, DailyTotal(day=day, order_count=0, revenue=Money.zero()))
            for day in days
        ]

    # --- Product rankings -----------------------------------------------------

    @staticmethod
    def top_sellers(items: Iterable[SoldItem], limit: int) -> list[ProductSales]:
        """Rank (product id, name) snapshots by quantity sold, highest first.

        Ties are broken by product id, then name, so the ranking is stable.
        """
        tallies: dict[tuple[int, str], _Tally] = {}
        for item in items:
            key = (item.product_id, item.product_name)
            tallies.setdefault(key, _Tally()).add(item)

        ranked = sorted(
            tallies.items(),
            key=lambda kv: (-kv[1].quantity, kv[0][0], kv[0][1]),
        )
        return [
            ProductSales(
                product_id=product_id,
                product_name=product_name,
                quantity_sold=tally.quantity,
                order_count=len(tally.order_ids),
            )
            for (product_id, product_name), tally in ranked[:limit]
        ]

    @staticmethod
    def product_performance(
        products: Iterable[Product],
        items: Iterable[SoldItem],
        since: datetime,
        limit: int,
    ) -> list[ProductPerformance]:
        """Sales per catalog product, including products that sold nothing.

        Quantity and revenue count only items sold at or after *since*;
        the distinct order count covers every item passed in.
        """
        tallies: dict[int, _Tally] = {}
        for item in items:
            tallies.setdefault(item.product_id, _Tally()).add(
                item, in_window=item.created_at >= since
            )

        rows = []
        for product in products:
            tally = tallies.get(product.id, _Tally())
            rows.append(
                ProductPerformance(
                    product=product,
                    quantity_sold=tally.quantity,
                    revenue=tally.revenue,
                    order_count=len(tally.order_ids),
                )
            )
        rows.sort(key=lambda row: (-row.quantity_sold, row.product.id or 0))
        return rows[:limit]
