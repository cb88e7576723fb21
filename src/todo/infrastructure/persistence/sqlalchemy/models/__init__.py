"""SQLAlchemy ORM models.

Importing this package registers every table on Base.metadata.
"""

from todo.infrastructure.persistence.sqlalchemy.models.base import Base, TimestampMixin
from todo.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = [
    "Base",
    "TimestampMixin",
    "UserModel",
]
