"""Application service: Create Order use case.

Validates the raw request, builds the line items with the caller's
price snapshot, and hands the finished aggregate to the repository,
which writes header and items in a single transaction.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from loguru import logger

from cafepos.application.dto import CreatedOrderDTO, OrderItemSpec
from cafepos.domain.clock import Clock
from cafepos.domain.exceptions import ValidationError
from cafepos.domain.model.order import Order, OrderLineItem, OrderType
from cafepos.domain.model.value_objects import MAX_AMOUNT, Money, Quantity
from cafepos.domain.repository.order_repository import OrderRepository

MISSING_ITEM_FIELD = (
    "Each item must have product_id, product_name, quantity, and unit_price"
)
NON_POSITIVE_ITEM = "Quantity and unit price must be positive numbers"
ITEM_TOO_LARGE = f"Unit price and line total cannot exceed {MAX_AMOUNT}"


def _is_missing(value: Any) -> bool:
    """Absent, blank, or zero all count as "not supplied"."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        return value == 0
    return False


def _to_decimal(value: Any, field_name: str) -> Decimal:
    if isinstance(value, bool):
        raise ValidationError(f"Item {field_name} must be a number")
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Item {field_name} must be a number") from exc
    if not number.is_finite():
        raise ValidationError(f"Item {field_name} must be a number")
    return number


def _build_line_item(spec: OrderItemSpec) -> OrderLineItem:
    if any(
        _is_missing(value)
        for value in (spec.product_id, spec.product_name, spec.quantity, spec.unit_price)
    ):
        raise ValidationError(MISSING_ITEM_FIELD)

    quantity = _to_decimal(spec.quantity, "quantity")
    unit_price = _to_decimal(spec.unit_price, "unit_price")
    if quantity <= 0 or unit_price <= 0:
        raise ValidationError(NON_POSITIVE_ITEM)
    if quantity != quantity.to_integral_value():
        raise ValidationError("Item quantity must be a whole number")
    # each operand is bounded first so the product cannot overflow
    if (
        unit_price > MAX_AMOUNT
        or quantity > MAX_AMOUNT
        or unit_price * quantity > MAX_AMOUNT
    ):
        raise ValidationError(ITEM_TOO_LARGE)

    price = Money(unit_price)
    if price.is_zero:
        # rounds to $0.00 at cent precision
        raise ValidationError(NON_POSITIVE_ITEM)

    try:
        product_id = int(spec.product_id)
    except (TypeError, ValueError) as exc:
        raise ValidationError("Item product_id must be an integer") from exc

    return OrderLineItem(
        product_id=product_id,
        product_name=str(spec.product_name).strip(),
        quantity=Quantity(int(quantity)),
        unit_price=price,  # <-- price snapshot
    )


class CreateOrderHandler:

    def __init__(self, order_repo: OrderRepository, clock: Clock) -> None:
        self._order_repo = order_repo
        self._clock = clock

    def handle(
        self,
        customer_name: str | None,
        item_specs: list[OrderItemSpec] | None,
        order_type: str | None = None,
        notes: str | None = None,
    ) -> CreatedOrderDTO:
        """Create a new pending order.

        Steps:
        1. Reject a blank customer name or an empty item list.
        2. Check each item in turn: all fields present, then quantity and
           price positive.  The first failing item stops validation.
        3. Let the Order aggregate assemble itself with a fresh opaque id.
        4. Persist header and items atomically and return id and total.
        """
        if not customer_name or not str(customer_name).strip() or not item_specs:
            raise ValidationError("Customer name and items are required")

        line_items = [_build_line_item(spec) for spec in item_specs]

        order = Order.create(
            order_id=self._order_repo.next_id(),
            customer_name=str(customer_name),
            items=line_items,
            created_at=self._clock.now(),
            order_type=OrderType.parse(order_type),
            notes=notes or "",
        )
        total = order.total
        self._order_repo.add(order)

        logger.info(
            "Order {} created for {} with {} item(s), total {}",
            order.id,
            order.customer_name,
            order.item_count,
            total,
        )
        return CreatedOrderDTO(id=order.id, total=total.amount)
