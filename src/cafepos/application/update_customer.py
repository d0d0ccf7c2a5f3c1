"""Application service: Update Customer use case."""

from __future__ import annotations

from cafepos.application.dto import CustomerChanges
from cafepos.domain.exceptions import EntityNotFoundError
from cafepos.domain.model.customer import Customer
from cafepos.domain.model.value_objects import UNSET
from cafepos.domain.repository.customer_repository import CustomerRepository


class UpdateCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, customer_id: int, changes: CustomerChanges) -> Customer:
        """Apply only the fields present in *changes*.

        An explicit ``None`` for phone or email clears it; ``UNSET``
        keeps the stored value.
        """
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundError("Customer not found")

        if changes.name is not UNSET:
            customer.rename(changes.name)
        customer.change_contact(
            phone=customer.phone if changes.phone is UNSET else changes.phone,
            email=customer.email if changes.email is UNSET else changes.email,
        )

        self._customer_repo.save(customer)
        return customer
