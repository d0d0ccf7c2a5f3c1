"""Abstract repository for Customer records.

Implementations raise ``ConflictError`` when an email address is already
taken by another customer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from cafepos.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def get_by_id(self, customer_id: int) -> Customer | None:
        """Return a customer by ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Customer]:
        """Return every customer ordered by name."""

    @abstractmethod
    def add(self, customer: Customer) -> Customer:
        """Insert a new customer and return it with its assigned ID."""

    @abstractmethod
    def save(self, customer: Customer) -> None:
        """Persist changes to an existing customer."""

    @abstractmethod
    def remove(self, customer_id: int) -> bool:
        """Delete a customer. Returns False if it does not exist."""
