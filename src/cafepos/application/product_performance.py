"""Application service: Product Performance use case (query).

Every available product appears, whether or not it sold anything in
the window.
"""

from __future__ import annotations

from cafepos.application.dto import ProductPerformanceDTO
from cafepos.domain.clock import Clock
from cafepos.domain.exceptions import ValidationError
from cafepos.domain.repository.order_repository import OrderRepository
from cafepos.domain.repository.product_repository import ProductRepository
from cafepos.domain.service.sales_aggregation import SalesAggregationService


class ProductPerformanceHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        clock: Clock,
        window_days: int = 30,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._sales = SalesAggregationService(clock)
        self._window_days = window_days

    def handle(self, limit: int = 10) -> list[ProductPerformanceDTO]:
        """Rank available products by quantity sold in the trailing window.

        Revenue and quantity are windowed; the order count is lifetime.
        """
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise ValidationError("Limit must be a positive integer")

        since = self._sales.trailing_window_start(self._window_days)
        rows = self._sales.product_performance(
            products=self._product_repo.list_available(),
            items=self._order_repo.sold_items_between(None, None),
            since=since,
            limit=limit,
        )
        return [
            ProductPerformanceDTO(
                id=row.product.id,  # type: ignore[arg-type]
                name=row.product.name,
                category=row.product.category,
                price=row.product.price.amount,
                total_sold=row.quantity_sold,
                total_revenue=row.revenue.amount,
                order_count=row.order_count,
            )
            for row in rows
        ]
