"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQL, in-memory) live in the
infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from cafepos.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_available(self) -> list[Product]:
        """Return available products ordered by category, then name."""

    @abstractmethod
    def count_available(self) -> int:
        """Number of products currently marked available."""

    @abstractmethod
    def add(self, product: Product) -> Product:
        """Insert a new product and return it with its assigned ID."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist changes to an existing product."""

    @abstractmethod
    def remove(self, product_id: int) -> bool:
        """Delete a product. Returns False if it does not exist."""
