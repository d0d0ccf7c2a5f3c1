"""Engine construction, schema creation and first-run seeding."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Engine, create_engine, event, func, insert, select
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from cafepos.domain.exceptions import StorageError
from cafepos.domain.model.value_objects import Money
from cafepos.infrastructure.logging import get_logger
from cafepos.infrastructure.persistence.schema import metadata, products

log = get_logger(__name__)

SAMPLE_PRODUCTS = [
    ("Espresso", "Rich and bold coffee shot", "2.50", "Coffee"),
    ("Cappuccino", "Espresso with steamed milk and foam", "4.00", "Coffee"),
    ("Latte", "Espresso with steamed milk", "4.50", "Coffee"),
    ("Americano", "Espresso with hot water", "3.00", "Coffee"),
    ("Mocha", "Espresso with chocolate and steamed milk", "5.00", "Coffee"),
    ("Macchiato", "Espresso with a dollop of foam", "3.50", "Coffee"),
    ("Croissant", "Buttery, flaky pastry", "3.50", "Pastry"),
    ("Blueberry Muffin", "Fresh baked muffin with blueberries", "2.75", "Pastry"),
    ("Bagel with Cream Cheese", "Everything bagel with cream cheese", "4.25", "Food"),
    ("Green Tea", "Organic green tea", "2.25", "Tea"),
]


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(database_url: str) -> Engine:
    """Build the process-wide connection pool for *database_url*.

    In-memory SQLite gets a single shared connection, otherwise every
    pooled connection would see its own empty database.
    """
    url = make_url(database_url)
    kwargs = {}
    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool

    engine = create_engine(url, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def init_schema(engine: Engine) -> None:
    """Create any missing tables."""
    try:
        metadata.create_all(engine)
    except SQLAlchemyError as exc:
        log.exception("Schema creation failed")
        raise StorageError("Could not initialise the database") from exc
    log.debug("Schema ready on {}", engine.url.render_as_string(hide_password=True))


def seed_sample_products(engine: Engine) -> int:
    """Insert the starter menu if the catalog is empty. Returns rows added."""
    now = datetime.now(timezone.utc)
    try:
        with engine.begin() as conn:
            existing = conn.execute(select(func.count()).select_from(products)).scalar_one()
            if existing:
                return 0
            conn.execute(
                insert(products),
                [
                    {
                        "name": name,
                        "description": description,
                        "price": Money.of(price),
                        "category": category,
                        "available": True,
                        "created_at": now,
                    }
                    for name, description, price, category in SAMPLE_PRODUCTS
                ],
            )
    except SQLAlchemyError as exc:
        log.exception("Seeding sample products failed")
        raise StorageError("Could not seed sample products") from exc

    log.info("Sample products inserted: {}", len(SAMPLE_PRODUCTS))
    return len(SAMPLE_PRODUCTS)
