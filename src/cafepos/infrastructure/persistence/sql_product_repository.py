"""SQLAlchemy Core implementation of ProductRepository."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Engine, delete, func, insert, select, update

from cafepos.domain.model.product import Product
from cafepos.domain.repository.product_repository import ProductRepository
from cafepos.infrastructure.persistence.connection import reading, writing
from cafepos.infrastructure.persistence.schema import products


class SqlProductRepository(ProductRepository):

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        with reading(self._engine) as conn:
            row = conn.execute(
                select(products).where(products.c.id == product_id)
            ).mappings().first()
        return self._to_domain(row) if row is not None else None

    def list_available(self) -> list[Product]:
        with reading(self._engine) as conn:
            rows = conn.execute(
                select(products)
                .where(products.c.available.is_(True))
                .order_by(products.c.category, products.c.name)
            ).mappings().all()
        return [self._to_domain(row) for row in rows]

    def count_available(self) -> int:
        with reading(self._engine) as conn:
            return conn.execute(
                select(func.count())
                .select_from(products)
                .where(products.c.available.is_(True))
            ).scalar_one()

    def add(self, product: Product) -> Product:
        created_at = product.created_at or datetime.now(timezone.utc)
        with writing(self._engine, "add product") as conn:
            result = conn.execute(
                insert(products).values(**self._to_row(product), created_at=created_at)
            )
        product.id = result.inserted_primary_key[0]
        product.created_at = created_at
        return product

    def save(self, product: Product) -> None:
        with writing(self._engine, "update product") as conn:
            conn.execute(
                update(products)
                .where(products.c.id == product.id)
                .values(**self._to_row(product))
            )

    def remove(self, product_id: int) -> bool:
        with writing(self._engine, "delete product") as conn:
            result = conn.execute(delete(products).where(products.c.id == product_id))
        return result.rowcount > 0

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_row(product: Product) -> dict:
        return {
            "name": product.name,
            "description": product.description,
            "price": product.price,
            "category": product.category,
            "available": product.available,
        }

    @staticmethod
    def _to_domain(row) -> Product:
        return Product(
            id=row["id"],
            name=row["name"],
            description=row["description"] or "",
            price=row["price"],
            category=row["category"],
            available=bool(row["available"]),
            created_at=row["created_at"],
        )
