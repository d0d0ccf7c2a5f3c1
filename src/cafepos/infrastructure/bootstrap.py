"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions and receives its
collaborators through its constructor.
"""

from __future__ import annotations

from functools import lru_cache

from sqlalchemy import Engine

from cafepos.infrastructure.clock import SystemClock
from cafepos.infrastructure.config import get_config
from cafepos.infrastructure.persistence.database import (
    create_db_engine,
    init_schema,
    seed_sample_products,
)
from cafepos.infrastructure.persistence.sql_customer_repository import (
    SqlCustomerRepository,
)
from cafepos.infrastructure.persistence.sql_order_repository import (
    SqlOrderRepository,
)
from cafepos.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)


def prepare_engine(database_url: str, seed: bool) -> Engine:
    """Create the pool, make sure the tables exist, optionally seed the menu."""
    db = create_db_engine(database_url)
    init_schema(db)
    if seed:
        seed_sample_products(db)
    return db


@lru_cache(maxsize=1)
def engine() -> Engine:
    config = get_config()
    return prepare_engine(config.database_url, config.seed_sample_products)


def clock() -> SystemClock:
    return SystemClock(get_config().timezone)


def order_repository() -> SqlOrderRepository:
    return SqlOrderRepository(engine())


def product_repository() -> SqlProductRepository:
    return SqlProductRepository(engine())


def customer_repository() -> SqlCustomerRepository:
    return SqlCustomerRepository(engine())
