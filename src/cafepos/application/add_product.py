"""Application service: Add Product use case."""

from __future__ import annotations

from typing import Any

from cafepos.domain.exceptions import ValidationError
from cafepos.domain.model.product import Product
from cafepos.domain.model.value_objects import Money
from cafepos.domain.repository.product_repository import ProductRepository


def parse_price(raw: Any) -> Money:
    """Coerce a caller-supplied price, rejecting zero and negatives."""
    if raw is None or isinstance(raw, bool) or raw == "":
        raise ValidationError("Price must be a positive number")
    try:
        price = Money.of(raw)
    except ValidationError as exc:
        raise ValidationError("Price must be a positive number") from exc
    if price.is_zero:
        raise ValidationError("Price must be a positive number")
    return price


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str | None,
        description: str | None,
        price: Any,
        category: str | None,
        available: bool = True,
    ) -> Product:
        """Add a new product to the menu; the store assigns its ID."""
        if not name or not description or price in (None, "") or not category:
            raise ValidationError(
                "Name, description, price, and category are required"
            )
        product = Product.create(
            name=name,
            description=description,
            price=parse_price(price),
            category=category,
            available=bool(available),
        )
        return self._product_repo.add(product)
