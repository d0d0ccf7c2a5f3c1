"""SQLAlchemy Core implementation of CustomerRepository."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Engine, delete, insert, select, update
from sqlalchemy.exc import IntegrityError

from cafepos.domain.exceptions import ConflictError
from cafepos.domain.model.customer import Customer
from cafepos.domain.repository.customer_repository import CustomerRepository
from cafepos.infrastructure.persistence.connection import reading, writing
from cafepos.infrastructure.persistence.schema import customers

DUPLICATE_EMAIL = "Customer with this email already exists"


def _is_duplicate_email(exc: IntegrityError) -> bool:
    # SQLite names the column, PostgreSQL names the constraint
    message = str(exc.orig)
    return "customers.email" in message or "uq_customers_email" in message


class SqlCustomerRepository(CustomerRepository):

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    # --- CustomerRepository interface -----------------------------------------

    def get_by_id(self, customer_id: int) -> Customer | None:
        with reading(self._engine) as conn:
            row = conn.execute(
                select(customers).where(customers.c.id == customer_id)
            ).mappings().first()
        return self._to_domain(row) if row is not None else None

    def list_all(self) -> list[Customer]:
        with reading(self._engine) as conn:
            rows = conn.execute(
                select(customers).order_by(customers.c.name, customers.c.id)
            ).mappings().all()
        return [self._to_domain(row) for row in rows]

    def add(self, customer: Customer) -> Customer:
        created_at = customer.created_at or datetime.now(timezone.utc)
        with writing(self._engine, "add customer") as conn:
            try:
                result = conn.execute(
                    insert(customers).values(
                        **self._to_row(customer), created_at=created_at
                    )
                )
            except IntegrityError as exc:
                if _is_duplicate_email(exc):
                    raise ConflictError(DUPLICATE_EMAIL) from exc
                raise
        customer.id = result.inserted_primary_key[0]
        customer.created_at = created_at
        return customer

    def save(self, customer: Customer) -> None:
        with writing(self._engine, "update customer") as conn:
            try:
                conn.execute(
                    update(customers)
                    .where(customers.c.id == customer.id)
                    .values(**self._to_row(customer))
                )
            except IntegrityError as exc:
                if _is_duplicate_email(exc):
                    raise ConflictError(DUPLICATE_EMAIL) from exc
                raise

    def remove(self, customer_id: int) -> bool:
        with writing(self._engine, "delete customer") as conn:
            result = conn.execute(delete(customers).where(customers.c.id == customer_id))
        return result.rowcount > 0

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_row(customer: Customer) -> dict:
        return {
            "name": customer.name,
            "phone": customer.phone,
            "email": customer.email,
        }

    @staticmethod
    def _to_domain(row) -> Customer:
        return Customer(
            id=row["id"],
            name=row["name"],
            phone=row["phone"],
            email=row["email"],
            created_at=row["created_at"],
        )
