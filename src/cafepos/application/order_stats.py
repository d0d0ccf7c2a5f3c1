"""Application service: Order Stats use case (query).

Per-day order count, revenue and average order value, optionally bounded
by an inclusive range of calendar dates in the clock's time zone.
"""

from __future__ import annotations

from datetime import date, timedelta

from cafepos.application.dto import OrderStatsDTO
from cafepos.domain.clock import Clock
from cafepos.domain.repository.order_repository import OrderRepository
from cafepos.domain.service.sales_aggregation import SalesAggregationService


class OrderStatsHandler:

    def __init__(self, order_repo: OrderRepository, clock: Clock) -> None:
        self._order_repo = order_repo
        self._clock = clock
        self._sales = SalesAggregationService(clock)

    def handle(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[OrderStatsDTO]:
        start = self._clock.start_of(start_date) if start_date else None
        end = (
            self._clock.start_of(end_date + timedelta(days=1)) if end_date else None
        )
        orders = self._order_repo.list_created_between(start, end)

        return [
            OrderStatsDTO(
                date=total.day,
                order_count=total.order_count,
                revenue=total.revenue.amount,
                avg_order_value=total.avg_order_value.amount,
            )
            for total in self._sales.daily_totals(orders)
        ]
