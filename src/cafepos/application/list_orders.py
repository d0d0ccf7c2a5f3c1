"""Application service: List Orders use case (query)."""

from __future__ import annotations

from cafepos.application.dto import OrderSummaryDTO
from cafepos.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> list[OrderSummaryDTO]:
        """Every order, newest first, each with its line-item count."""
        return [
            OrderSummaryDTO.from_summary(summary)
            for summary in self._order_repo.list_summaries()
        ]
