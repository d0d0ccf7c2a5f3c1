"""Application service: customer queries."""

from __future__ import annotations

from cafepos.domain.exceptions import EntityNotFoundError
from cafepos.domain.model.customer import Customer
from cafepos.domain.repository.customer_repository import CustomerRepository


class ShowCustomersHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self) -> list[Customer]:
        return self._customer_repo.list_all()

    def handle_one(self, customer_id: int) -> Customer:
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundError("Customer not found")
        return customer
