"""Read-side records produced by the sales aggregation service."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from cafepos.domain.model.product import Product
from cafepos.domain.model.value_objects import Money


@dataclass(frozen=True)
class SoldItem:
    """One order line joined with the creation time of its order."""

    order_id: str
    product_id: int
    product_name: str
    quantity: int
    line_total: Money
    created_at: datetime


@dataclass(frozen=True)
class DailyTotal:
    day: date
    order_count: int
    revenue: Money

    @property
    def avg_order_value(self) -> Money:
        if self.order_count == 0:
            return Money.zero()
        return self.revenue.divide(self.order_count)


@dataclass(frozen=True)
class ProductSales:
    """Quantity sold for one (product id, product name) snapshot pair."""

    product_id: int
    product_name: str
    quantity_sold: int
    order_count: int


@dataclass(frozen=True)
class ProductPerformance:
    product: Product
    quantity_sold: int
    revenue: Money
    order_count: int
