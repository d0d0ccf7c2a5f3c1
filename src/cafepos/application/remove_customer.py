"""Application service: Remove Customer use case."""

from __future__ import annotations

from cafepos.domain.exceptions import EntityNotFoundError
from cafepos.domain.repository.customer_repository import CustomerRepository


class RemoveCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, customer_id: int) -> None:
        if not self._customer_repo.remove(customer_id):
            raise EntityNotFoundError("Customer not found")
