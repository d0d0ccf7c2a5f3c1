"""Abstract repository for the Order aggregate.

Lookups that miss return ``None`` (or ``False``); storage failures raise
``StorageError``.  The two are never conflated.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from cafepos.domain.model.order import Order, OrderStatus, OrderSummary
from cafepos.domain.model.sales import SoldItem


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate a new opaque, globally unique order ID."""

    @abstractmethod
    def add(self, order: Order) -> None:
        """Persist a new order and all its line items as one atomic unit."""

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order with its line items, or None if not found."""

    @abstractmethod
    def list_summaries(self) -> list[OrderSummary]:
        """Return every order, newest first, annotated with its item count."""

    @abstractmethod
    def update_status(self, order_id: str, status: OrderStatus) -> bool:
        """Set the status of an order. Returns False if it does not exist."""

    # --- Read helpers for reporting -------------------------------------------

    @abstractmethod
    def count_by_status(self, status: OrderStatus) -> int:
        """Number of orders currently in *status*."""

    @abstractmethod
    def list_recent(self, limit: int) -> list[OrderSummary]:
        """The *limit* most recently created orders, newest first."""

    @abstractmethod
    def list_created_between(
        self, start: datetime | None, end: datetime | None
    ) -> list[OrderSummary]:
        """Orders created in ``[start, end)``; a missing bound is unbounded."""

    @abstractmethod
    def sold_items_between(
        self, start: datetime | None, end: datetime | None
    ) -> list[SoldItem]:
        """Line items of orders created in ``[start, end)``."""
