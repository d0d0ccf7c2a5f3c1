"""Connection scopes shared by the SQL repositories.

Both helpers translate driver failures into ``StorageError`` with the
original exception chained, so callers see one infrastructure error type
and can tell it apart from "not found".
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from cafepos.domain.exceptions import StorageError
from cafepos.infrastructure.logging import get_logger

log = get_logger(__name__)


@contextmanager
def reading(engine: Engine) -> Iterator[Connection]:
    """A plain connection for queries."""
    try:
        with engine.connect() as conn:
            yield conn
    except SQLAlchemyError as exc:
        log.exception("Database read failed")
        raise StorageError("Database read failed") from exc


@contextmanager
def writing(engine: Engine, action: str) -> Iterator[Connection]:
    """A connection inside a transaction, committed on clean exit.

    Any exception rolls back everything written in the block.
    """
    try:
        with engine.begin() as conn:
            yield conn
    except SQLAlchemyError as exc:
        log.exception("Database write failed: {}", action)
        raise StorageError(f"Failed to {action}") from exc
