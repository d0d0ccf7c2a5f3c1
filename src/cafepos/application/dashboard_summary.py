"""Application service: Dashboard Summary use case (query).

Collects the headline numbers for the shop dashboard in one call.  Every
figure is recomputed from the store; nothing is cached between calls.
"""

from __future__ import annotations

from cafepos.application.dto import (
    DailyRevenueDTO,
    DashboardSummaryDTO,
    OrderSummaryDTO,
    PopularProductDTO,
)
from cafepos.domain.clock import Clock
from cafepos.domain.model.order import OrderStatus
from cafepos.domain.repository.order_repository import OrderRepository
from cafepos.domain.repository.product_repository import ProductRepository
from cafepos.domain.service.sales_aggregation import SalesAggregationService


class DashboardSummaryHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        clock: Clock,
        recent_limit: int = 5,
        trend_days: int = 7,
        popular_window_days: int = 30,
        popular_limit: int = 5,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._clock = clock
        self._sales = SalesAggregationService(clock)
        self._recent_limit = recent_limit
        self._trend_days = trend_days
        self._popular_window_days = popular_window_days
        self._popular_limit = popular_limit

    def handle(self) -> DashboardSummaryDTO:
        # Today, in the clock's time zone
        today = self._clock.today()
        start, end = self._clock.day_bounds(today)
        todays = self._order_repo.list_created_between(start, end)
        (today_total,) = self._sales.daily_series(todays, [today])

        # Trailing calendar days, zero-filled
        days = self._sales.trailing_dates(self._trend_days)
        trend_orders = self._order_repo.list_created_between(
            self._clock.start_of(days[0]), None
        )
        series = self._sales.daily_series(trend_orders, days)

        # Best sellers over the trailing window
        since = self._sales.trailing_window_start(self._popular_window_days)
        sold = self._order_repo.sold_items_between(since, None)
        popular = self._sales.top_sellers(sold, self._popular_limit)

        return DashboardSummaryDTO(
            today_orders=today_total.order_count,
            today_revenue=today_total.revenue.amount,
            pending_orders=self._order_repo.count_by_status(OrderStatus.PENDING),
            total_products=self._product_repo.count_available(),
            recent_orders=[
                OrderSummaryDTO.from_summary(summary)
                for summary in self._order_repo.list_recent(self._recent_limit)
            ],
            weekly_revenue=[
                DailyRevenueDTO(
                    date=total.day,
                    order_count=total.order_count,
                    revenue=total.revenue.amount,
                )
                for total in series
            ],
            popular_products=[
                PopularProductDTO(
                    product_id=row.product_id,
                    product_name=row.product_name,
                    total_sold=row.quantity_sold,
                    order_count=row.order_count,
                )
                for row in popular
            ],
        )
