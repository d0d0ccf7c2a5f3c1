"""Application service: Update Order Status use case.

Any of the five statuses may follow any other, including re-opening a
completed or cancelled order.  Only the value itself is checked.
"""

from __future__ import annotations

from loguru import logger

from cafepos.application.dto import StatusChangeDTO
from cafepos.domain.exceptions import EntityNotFoundError
from cafepos.domain.model.order import OrderStatus
from cafepos.domain.repository.order_repository import OrderRepository


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, status: str | None) -> StatusChangeDTO:
        # Validate the value before touching the store
        new_status = OrderStatus.parse(status)

        if not self._order_repo.update_status(order_id, new_status):
            raise EntityNotFoundError("Order not found")

        logger.info("Order {} moved to {}", order_id, new_status.value)
        return StatusChangeDTO(order_id=order_id, status=new_status.value)
