"""Application service: menu queries."""

from __future__ import annotations

from cafepos.domain.exceptions import EntityNotFoundError
from cafepos.domain.model.product import Product
from cafepos.domain.repository.product_repository import ProductRepository


class ShowProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[Product]:
        """Available products, grouped by category then name."""
        return self._product_repo.list_available()

    def handle_one(self, product_id: int) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product not found")
        return product
