"""Order aggregate, the core of the domain.

The Order is an aggregate root that owns its line items.  Once created,
an order is append-only: items and total never change, only ``status``
moves (through ``OrderStatus``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from cafepos.domain.exceptions import ValidationError
from cafepos.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    PREPARING = "preparing"
    READY = "ready"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @classmethod
    def parse(cls, value: str | None) -> OrderStatus:
        """Resolve a raw status string, rejecting anything outside the set.

        Any status may follow any other; there is no adjacency rule.
        """
        for status in cls:
            if status.value == value:
                return status
        allowed = ", ".join(s.value for s in cls)
        raise ValidationError(f"Invalid status. Valid statuses are: {allowed}")


class OrderType(Enum):
    DINE_IN = "dine-in"
    TAKEAWAY = "takeaway"
    DELIVERY = "delivery"

    @classmethod
    def parse(cls, value: str | None) -> OrderType:
        if value is None or value == "":
            return cls.DINE_IN
        for order_type in cls:
            if order_type.value == value:
                return order_type
        allowed = ", ".join(t.value for t in cls)
        raise ValidationError(f"Invalid order type. Valid order types are: {allowed}")


@dataclass(frozen=True)
class OrderLineItem:
    """Captures the product name and price of a product at order time.

    Later catalog edits or deletions never touch these values.
    """

    product_id: int
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked at order-creation time

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules.  The plain ``__init__`` does no checking; the
    repository uses it to reconstitute persisted orders.
    """

    id: str
    customer_name: str
    items: list[OrderLineItem]
    created_at: datetime
    status: OrderStatus = OrderStatus.PENDING
    order_type: OrderType = OrderType.DINE_IN
    notes: str = ""

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        order_id: str,
        customer_name: str,
        items: list[OrderLineItem],
        created_at: datetime,
        order_type: OrderType = OrderType.DINE_IN,
        notes: str = "",
    ) -> Order:
        """Create a new pending order, enforcing all invariants."""
        if not order_id:
            raise ValidationError("Order id is required")
        if not customer_name or not customer_name.strip() or not items:
            raise ValidationError("Customer name and items are required")
        if created_at.tzinfo is None:
            raise ValidationError("Order creation time must be timezone-aware")

        return Order(
            id=order_id,
            customer_name=customer_name.strip(),
            items=list(items),
            created_at=created_at,
            order_type=order_type,
            notes=notes,
        )

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def item_count(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class OrderSummary:
    """Order header as read back for listings, with a computed item count.

    ``total_amount`` is the stored total written alongside the line items
    when the order was created.
    """

    id: str
    customer_name: str
    total_amount: Money
    status: OrderStatus
    order_type: OrderType
    notes: str
    created_at: datetime
    item_count: int = field(default=0)
