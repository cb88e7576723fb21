"""Todo Auth - generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the user domain. It handles:
- Password hashing (bcrypt)
- JWT token creation and verification

Usage:
    from todo_auth import PasswordHashingService, JWTService
"""

from todo_auth.exceptions import (
    AuthError,
    InvalidTokenError,
    WeakPasswordError,
)
from todo_auth.schemas import Token, TokenPayload
from todo_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "Token",
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "WeakPasswordError",
]
