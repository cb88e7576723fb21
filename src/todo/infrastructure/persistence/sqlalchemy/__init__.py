"""SQLAlchemy persistence for the todo domain."""

from todo.infrastructure.persistence.sqlalchemy.models import Base, UserModel
from todo.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
