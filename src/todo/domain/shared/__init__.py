"""Building blocks shared by every domain module."""

from todo.domain.shared.exceptions import (
    DatabaseError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    UnauthorizedError,
    ValidationError,
)
from todo.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "DatabaseError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "UnauthorizedError",
    "ValidationError",
    "ensure_tz_aware",
    "utc_now",
]
