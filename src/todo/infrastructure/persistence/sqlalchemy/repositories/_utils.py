"""Shared utilities for SQLAlchemy repositories."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import (
    DBAPIError,
    IntegrityError,
    OperationalError,
    SQLAlchemyError,
)

from todo.domain.shared.exceptions import DatabaseError

logger = logging.getLogger(__name__)


@contextmanager
def translate_db_errors(operation: str) -> Iterator[None]:
    """Re-raise SQLAlchemy failures inside the block as DatabaseError.

    Domain exceptions raised inside the block pass through untouched.
    IntegrityError is left to callers that need to inspect it first.
    """
    try:
        yield
    except IntegrityError as e:
        logger.error("DB integrity error during %s: %s", operation, e)
        raise DatabaseError(
            "Integrity constraint violated",
            details={"operation": operation},
        ) from e
    except OperationalError as e:
        logger.error("DB operational error during %s: %s", operation, e)
        raise DatabaseError(
            "Connection or operational error",
            details={"operation": operation},
        ) from e
    except DBAPIError as e:
        logger.error("DB driver error during %s: %s", operation, e)
        raise DatabaseError(
            "Database driver error",
            details={"operation": operation},
        ) from e
    except SQLAlchemyError as e:
        logger.error("SQLAlchemy error during %s: %s", operation, e)
        raise DatabaseError(
            "Database operation failed",
            details={"operation": operation},
        ) from e


def is_unique_violation(error: IntegrityError) -> bool:
    """Whether an IntegrityError comes from a UNIQUE constraint (SQLite or PostgreSQL)."""
    text = str(error).lower()
    return "unique" in text
