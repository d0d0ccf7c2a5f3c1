"""Application service: Update Product use case."""

from __future__ import annotations

from cafepos.application.add_product import parse_price
from cafepos.application.dto import ProductChanges
from cafepos.domain.exceptions import EntityNotFoundError
from cafepos.domain.model.product import Product
from cafepos.domain.model.value_objects import UNSET
from cafepos.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, changes: ProductChanges) -> Product:
        """Apply only the fields present in *changes*.

        A new price does NOT affect any existing orders; they captured
        a price snapshot at creation time.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product not found")

        if changes.price is not UNSET:
            product.update_price(parse_price(changes.price))
        if changes.name is not UNSET:
            product.rename(changes.name)
        if changes.description is not UNSET:
            product.description = changes.description or ""
        if changes.category is not UNSET:
            product.recategorize(changes.category)
        if changes.available is not UNSET:
            product.available = bool(changes.available)

        self._product_repo.save(product)
        return product
