"""In-memory fakes for testing.

These implement the same abstract interfaces as the SQL repositories
but keep everything in a dict. No database, no side effects.
"""

from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo

from cafepos.domain.clock import Clock
from cafepos.domain.model.customer import Customer
from cafepos.domain.model.order import Order, OrderStatus, OrderSummary
from cafepos.domain.model.product import Product
from cafepos.domain.model.sales import SoldItem
from cafepos.domain.exceptions import ConflictError
from cafepos.domain.repository.customer_repository import CustomerRepository
from cafepos.domain.repository.order_repository import OrderRepository
from cafepos.domain.repository.product_repository import ProductRepository


class FixedClock(Clock):
    """A clock that only moves when told to."""

    def __init__(self, now: datetime, tz_name: str = "UTC") -> None:
        self._now = now
        self._tz = ZoneInfo(tz_name)

    @property
    def tz(self) -> tzinfo:
        return self._tz

    def now(self) -> datetime:
        return self._now

    def advance(self, **kwargs) -> None:
        self._now = self._now + timedelta(**kwargs)

    def set(self, now: datetime) -> None:
        self._now = now


def utc(year: int, month: int, day: int, hour: int = 12, minute: int = 0) -> datetime:
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


def _in_window(created_at: datetime, start: datetime | None, end: datetime | None) -> bool:
    if start is not None and created_at < start:
        return False
    if end is not None and created_at >= end:
        return False
    return True


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[str, Order] = {}

    def next_id(self) -> str:
        return str(uuid.uuid4())

    def add(self, order: Order) -> None:
        self._store[order.id] = order

    def get_by_id(self, order_id: str) -> Order | None:
        return self._store.get(order_id)

    def list_summaries(self) -> list[OrderSummary]:
        return self._newest_first(self._store.values())

    def update_status(self, order_id: str, status: OrderStatus) -> bool:
        order = self._store.get(order_id)
        if order is None:
            return False
        order.status = status
        return True

    def count_by_status(self, status: OrderStatus) -> int:
        return sum(1 for o in self._store.values() if o.status == status)

    def list_recent(self, limit: int) -> list[OrderSummary]:
        return self.list_summaries()[:limit]

    def list_created_between(
        self, start: datetime | None, end: datetime | None
    ) -> list[OrderSummary]:
        return self._newest_first(
            o for o in self._store.values() if _in_window(o.created_at, start, end)
        )

    def sold_items_between(
        self, start: datetime | None, end: datetime | None
    ) -> list[SoldItem]:
        return [
            SoldItem(
                order_id=o.id,
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity.value,
                line_total=item.line_total,
                created_at=o.created_at,
            )
            for o in self._store.values()
            if _in_window(o.created_at, start, end)
            for item in o.items
        ]

    @staticmethod
    def _newest_first(orders) -> list[OrderSummary]:
        summaries = [
            OrderSummary(
                id=o.id,
                customer_name=o.customer_name,
                total_amount=o.total,
                status=o.status,
                order_type=o.order_type,
                notes=o.notes,
                created_at=o.created_at,
                item_count=o.item_count,
            )
            for o in orders
        ]
        return sorted(summaries, key=lambda s: s.created_at, reverse=True)


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: int) -> Product | None:
        product = self._store.get(product_id)
        return replace(product) if product is not None else None

    def list_available(self) -> list[Product]:
        return sorted(
            (p for p in self._store.values() if p.available),
            key=lambda p: (p.category, p.name),
        )

    def count_available(self) -> int:
        return len(self.list_available())

    def add(self, product: Product) -> Product:
        product.id = max(self._store, default=0) + 1
        self._store[product.id] = product
        return product

    def save(self, product: Product) -> None:
        self._store[product.id] = product

    def remove(self, product_id: int) -> bool:
        return self._store.pop(product_id, None) is not None


class FakeCustomerRepository(CustomerRepository):

    def __init__(self, customers: list[Customer] | None = None) -> None:
        self._store: dict[int, Customer] = {}
        for c in customers or []:
            self._store[c.id] = c

    def get_by_id(self, customer_id: int) -> Customer | None:
        customer = self._store.get(customer_id)
        return replace(customer) if customer is not None else None

    def list_all(self) -> list[Customer]:
        return sorted(self._store.values(), key=lambda c: (c.name, c.id))

    def add(self, customer: Customer) -> Customer:
        self._check_email(customer)
        customer.id = max(self._store, default=0) + 1
        self._store[customer.id] = customer
        return customer

    def save(self, customer: Customer) -> None:
        self._check_email(customer)
        self._store[customer.id] = customer

    def remove(self, customer_id: int) -> bool:
        return self._store.pop(customer_id, None) is not None

    def _check_email(self, customer: Customer) -> None:
        if customer.email is None:
            return
        for other in self._store.values():
            if other.id != customer.id and other.email == customer.email:
                raise ConflictError("Customer with this email already exists")
