"""Application service: Remove Product use case.

Past orders keep their own product name and price, so removing a product
from the menu leaves order history untouched.
"""

from __future__ import annotations

from cafepos.domain.exceptions import EntityNotFoundError
from cafepos.domain.repository.product_repository import ProductRepository


class RemoveProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> None:
        if not self._product_repo.remove(product_id):
            raise EntityNotFoundError("Product not found")
