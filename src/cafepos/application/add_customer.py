"""Application service: Add Customer use case."""

from __future__ import annotations

from cafepos.domain.model.customer import Customer
from cafepos.domain.repository.customer_repository import CustomerRepository


class AddCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(
        self,
        name: str | None,
        phone: str | None = None,
        email: str | None = None,
    ) -> Customer:
        """Register a customer. A taken email raises ConflictError."""
        customer = Customer.create(name=name, phone=phone, email=email)
        return self._customer_repo.add(customer)
