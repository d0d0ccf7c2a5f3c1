"""SQLAlchemy Core table definitions.

Money columns hold integer cents so sums and the line-total check are
exact in every backend.  Timestamps are stored as naive UTC and handed
back timezone-aware.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.types import TypeDecorator

from cafepos.domain.model.order import OrderStatus, OrderType
from cafepos.domain.model.value_objects import Money


class MoneyCents(TypeDecorator):
    """``Money`` <-> integer cents."""

    impl = Integer
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return value.cents

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Money.from_cents(int(value))


class UtcDateTime(TypeDecorator):
    """Aware ``datetime`` <-> naive UTC column."""

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            raise ValueError("Refusing to store a naive datetime")
        return value.astimezone(timezone.utc).replace(tzinfo=None)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if isinstance(value, str):
            value = datetime.fromisoformat(value)
        return value.replace(tzinfo=timezone.utc)


def _one_of(column: str, values: list[str]) -> str:
    quoted = ", ".join(f"'{v}'" for v in values)
    return f"{column} IN ({quoted})"


metadata = MetaData()

products = Table(
    "products",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(200), nullable=False),
    Column("description", Text, nullable=False, default=""),
    Column("price", MoneyCents, nullable=False),
    Column("category", String(100), nullable=False),
    Column("available", Boolean, nullable=False, default=True),
    Column("created_at", UtcDateTime, nullable=False),
    CheckConstraint("price > 0", name="ck_products_price_positive"),
)

customers = Table(
    "customers",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(200), nullable=False),
    Column("phone", String(50), nullable=True),
    Column("email", String(254), nullable=True),
    Column("created_at", UtcDateTime, nullable=False),
    UniqueConstraint("email", name="uq_customers_email"),
)

orders = Table(
    "orders",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("customer_name", String(200), nullable=False),
    Column("total_amount", MoneyCents, nullable=False),
    Column("status", String(20), nullable=False, default=OrderStatus.PENDING.value),
    Column("order_type", String(20), nullable=False, default=OrderType.DINE_IN.value),
    Column("notes", Text, nullable=False, default=""),
    Column("created_at", UtcDateTime, nullable=False),
    CheckConstraint(
        _one_of("status", [s.value for s in OrderStatus]), name="ck_orders_status"
    ),
    CheckConstraint(
        _one_of("order_type", [t.value for t in OrderType]), name="ck_orders_order_type"
    ),
    Index("ix_orders_created_at", "created_at"),
    Index("ix_orders_status", "status"),
)

order_items = Table(
    "order_items",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "order_id",
        String(36),
        ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    # Plain reference: the catalog row may change or disappear later.
    Column("product_id", Integer, nullable=False),
    Column("product_name", String(200), nullable=False),
    Column("quantity", Integer, nullable=False),
    Column("unit_price", MoneyCents, nullable=False),
    Column("total_price", MoneyCents, nullable=False),
    CheckConstraint("quantity > 0", name="ck_order_items_quantity_positive"),
    CheckConstraint("unit_price > 0", name="ck_order_items_unit_price_positive"),
    CheckConstraint(
        "total_price = quantity * unit_price", name="ck_order_items_line_total"
    ),
)
