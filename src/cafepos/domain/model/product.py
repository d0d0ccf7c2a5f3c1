"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, products are added and removed from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from cafepos.domain.exceptions import ValidationError
from cafepos.domain.model.value_objects import Money


@dataclass
class Product:
    """A product on the menu.

    ``id`` is ``None`` until the record store assigns one.  Existing
    orders never reference this object; they hold their own name and
    price snapshot.
    """

    id: int | None
    name: str
    description: str
    price: Money
    category: str
    available: bool = True
    created_at: datetime | None = field(default=None)

    @staticmethod
    def create(
        name: str | None,
        description: str | None,
        price: Money,
        category: str | None,
        available: bool = True,
    ) -> Product:
        if not name or not description or not category:
            raise ValidationError(
                "Name, description, price, and category are required"
            )
        product = Product(
            id=None,
            name=name.strip(),
            description=description,
            price=price,
            category=category.strip(),
            available=available,
        )
        product.update_price(price)
        return product

    def rename(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        self.name = name.strip()

    def recategorize(self, category: str) -> None:
        if not category or not category.strip():
            raise ValidationError("Product category is required")
        self.category = category.strip()

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because orders
        capture a price snapshot at creation time.
        """
        if new_price.is_zero:
            raise ValidationError("Price must be a positive number")
        self.price = new_price
