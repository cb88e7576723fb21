"""User domain manages user identity and profile data.

This domain handles:
- User aggregate (id, email, password hash, profile names)
- The repository contract the persistence layer implements
- User-specific error types
"""

from todo.domain.user.aggregates import User
from todo.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from todo.domain.user.repositories import UserRepository

__all__ = [
    "EmailAlreadyExistsError",
    "InvalidCredentialsError",
    "User",
    "UserNotFoundError",
    "UserRepository",
]
