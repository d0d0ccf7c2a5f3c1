"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI/HTTP layers and the application layer
without exposing domain internals to the outside world.  Money is passed
as a two-place ``Decimal``; presentation is left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from cafepos.domain.model.order import Order, OrderSummary
from cafepos.domain.model.value_objects import UNSET

# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: one requested line, exactly as the caller supplied it.

    Fields are left loosely typed; the create-order handler decides what
    counts as missing or invalid.
    """

    product_id: Any = None
    product_name: Any = None
    quantity: Any = None
    unit_price: Any = None


@dataclass(frozen=True)
class ProductChanges:
    """Input: partial product update. ``UNSET`` means "leave as is"."""

    name: Any = UNSET
    description: Any = UNSET
    price: Any = UNSET
    category: Any = UNSET
    available: Any = UNSET


@dataclass(frozen=True)
class CustomerChanges:
    """Input: partial customer update. ``UNSET`` means "leave as is".

    ``phone`` and ``email`` may be explicitly set to ``None`` to clear them.
    """

    name: Any = UNSET
    phone: Any = UNSET
    email: Any = UNSET


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class OrderLineItemDTO:
    product_id: int
    product_name: str
    quantity: int
    unit_price: Decimal
    line_total: Decimal


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order with its line items."""

    id: str
    customer_name: str
    status: str
    order_type: str
    notes: str
    items: list[OrderLineItemDTO]
    total: Decimal
    created_at: datetime

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            customer_name=order.customer_name,
            status=order.status.value,
            order_type=order.order_type.value,
            notes=order.notes,
            items=[
                OrderLineItemDTO(
                    product_id=item.product_id,
                    product_name=item.product_name,
                    quantity=item.quantity.value,
                    unit_price=item.unit_price.amount,
                    line_total=item.line_total.amount,
                )
                for item in order.items
            ],
            total=order.total.amount,
            created_at=order.created_at,
        )


@dataclass(frozen=True)
class OrderSummaryDTO:
    """Output: an order header as shown in listings."""

    id: str
    customer_name: str
    status: str
    order_type: str
    notes: str
    total: Decimal
    created_at: datetime
    item_count: int

    @staticmethod
    def from_summary(summary: OrderSummary) -> OrderSummaryDTO:
        return OrderSummaryDTO(
            id=summary.id,
            customer_name=summary.customer_name,
            status=summary.status.value,
            order_type=summary.order_type.value,
            notes=summary.notes,
            total=summary.total_amount.amount,
            created_at=summary.created_at,
            item_count=summary.item_count,
        )


@dataclass(frozen=True)
class CreatedOrderDTO:
    id: str
    total: Decimal


@dataclass(frozen=True)
class StatusChangeDTO:
    order_id: str
    status: str


# ---------------------------------------------------------------------------
# Dashboard
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DailyRevenueDTO:
    date: date
    order_count: int
    revenue: Decimal


@dataclass(frozen=True)
class OrderStatsDTO:
    date: date
    order_count: int
    revenue: Decimal
    avg_order_value: Decimal


@dataclass(frozen=True)
class PopularProductDTO:
    product_id: int
    product_name: str
    total_sold: int
    order_count: int


@dataclass(frozen=True)
class DashboardSummaryDTO:
    today_orders: int
    today_revenue: Decimal
    pending_orders: int
    total_products: int
    recent_orders: list[OrderSummaryDTO]
    weekly_revenue: list[DailyRevenueDTO]
    popular_products: list[PopularProductDTO]


@dataclass(frozen=True)
class ProductPerformanceDTO:
    id: int
    name: str
    category: str
    price: Decimal
    total_sold: int
    total_revenue: Decimal
    order_count: int
