"""SQLAlchemy Core implementation of OrderRepository."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import Connection, Engine, Select, func, insert, select, update

from cafepos.domain.model.order import (
    Order,
    OrderLineItem,
    OrderStatus,
    OrderSummary,
    OrderType,
)
from cafepos.domain.model.sales import SoldItem
from cafepos.domain.model.value_objects import Quantity
from cafepos.domain.repository.order_repository import OrderRepository
from cafepos.infrastructure.persistence.connection import reading, writing
from cafepos.infrastructure.persistence.schema import order_items, orders


class SqlOrderRepository(OrderRepository):

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> str:
        return str(uuid.uuid4())

    def add(self, order: Order) -> None:
        """Insert header and items in one transaction.

        Nothing is committed until every item is written; a failure at
        any point leaves no row for ``order.id``.
        """
        with writing(self._engine, "save order") as conn:
            conn.execute(
                insert(orders).values(
                    id=order.id,
                    customer_name=order.customer_name,
                    total_amount=order.total,
                    status=order.status.value,
                    order_type=order.order_type.value,
                    notes=order.notes,
                    created_at=order.created_at,
                )
            )
            self._insert_items(conn, order)

    def get_by_id(self, order_id: str) -> Order | None:
        with reading(self._engine) as conn:
            header = conn.execute(
                select(orders).where(orders.c.id == order_id)
            ).mappings().first()
            if header is None:
                return None
            rows = conn.execute(
                select(order_items)
                .where(order_items.c.order_id == order_id)
                .order_by(order_items.c.id)
            ).mappings().all()

        return Order(
            id=header["id"],
            customer_name=header["customer_name"],
            items=[self._to_line_item(row) for row in rows],
            created_at=header["created_at"],
            status=OrderStatus(header["status"]),
            order_type=OrderType(header["order_type"]),
            notes=header["notes"] or "",
        )

    def list_summaries(self) -> list[OrderSummary]:
        return self._summaries(self._summary_query())

    def update_status(self, order_id: str, status: OrderStatus) -> bool:
        with writing(self._engine, "update order status") as conn:
            result = conn.execute(
                update(orders)
                .where(orders.c.id == order_id)
                .values(status=status.value)
            )
        # Counts matched rows, so re-applying the same status still reports True
        return result.rowcount > 0

    def count_by_status(self, status: OrderStatus) -> int:
        with reading(self._engine) as conn:
            return conn.execute(
                select(func.count())
                .select_from(orders)
                .where(orders.c.status == status.value)
            ).scalar_one()

    def list_recent(self, limit: int) -> list[OrderSummary]:
        return self._summaries(self._summary_query().limit(limit))

    def list_created_between(
        self, start: datetime | None, end: datetime | None
    ) -> list[OrderSummary]:
        query = self._summary_query()
        if start is not None:
            query = query.where(orders.c.created_at >= start)
        if end is not None:
            query = query.where(orders.c.created_at < end)
        return self._summaries(query)

    def sold_items_between(
        self, start: datetime | None, end: datetime | None
    ) -> list[SoldItem]:
        query = select(
            order_items.c.order_id,
            order_items.c.product_id,
            order_items.c.product_name,
            order_items.c.quantity,
            order_items.c.total_price,
            orders.c.created_at,
        ).join(orders, order_items.c.order_id == orders.c.id)
        if start is not None:
            query = query.where(orders.c.created_at >= start)
        if end is not None:
            query = query.where(orders.c.created_at < end)

        with reading(self._engine) as conn:
            rows = conn.execute(query.order_by(order_items.c.id)).mappings().all()

        return [
            SoldItem(
                order_id=row["order_id"],
                product_id=row["product_id"],
                product_name=row["product_name"],
                quantity=row["quantity"],
                line_total=row["total_price"],
                created_at=row["created_at"],
            )
            for row in rows
        ]

    # --- Write helpers --------------------------------------------------------

    @staticmethod
    def _insert_items(conn: Connection, order: Order) -> None:
        conn.execute(
            insert(order_items),
            [
                {
                    "order_id": order.id,
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity.value,
                    "unit_price": item.unit_price,
                    "total_price": item.line_total,
                }
                for item in order.items
            ],
        )

    # --- Read helpers ---------------------------------------------------------

    @staticmethod
    def _summary_query() -> Select:
        """Order headers LEFT JOINed to a per-order item count, newest first."""
        item_count = func.count(order_items.c.id).label("item_count")
        return (
            select(orders, item_count)
            .select_from(
                orders.outerjoin(order_items, order_items.c.order_id == orders.c.id)
            )
            .group_by(*orders.c)
            .order_by(orders.c.created_at.desc(), orders.c.id)
        )

    def _summaries(self, query: Select) -> list[OrderSummary]:
        with reading(self._engine) as conn:
            rows = conn.execute(query).mappings().all()
        return [
            OrderSummary(
                id=row["id"],
                customer_name=row["customer_name"],
                total_amount=row["total_amount"],
                status=OrderStatus(row["status"]),
                order_type=OrderType(row["order_type"]),
                notes=row["notes"] or "",
                created_at=row["created_at"],
                item_count=row["item_count"],
            )
            for row in rows
        ]

    @staticmethod
    def _to_line_item(row) -> OrderLineItem:
        return OrderLineItem(
            product_id=row["product_id"],
            product_name=row["product_name"],
            quantity=Quantity(row["quantity"]),
            unit_price=row["unit_price"],
        )
