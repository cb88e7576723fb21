"""Error vocabulary of the domain.

Every failure a client can observe is a DomainException carrying an
ErrorCode. The HTTP layer turns the code into a status in one place.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Machine-readable codes returned in error bodies. Clients match on them."""

    # 400
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    DATABASE_ERROR = "DATABASE_ERROR"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"

    # 401
    UNAUTHORIZED = "UNAUTHORIZED"

    # 404
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # 500
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Root of all domain errors.

    Attributes
    ----------
    message
        Text shown to the client.
    code
        Stable identifier, see ErrorCode.
    details
        Extra context for the logs only.
    """

    default_code = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, "
            f"code={self.code.value!r}, details={self.details!r})"
        )


class ValidationError(DomainException):
    """Input was rejected."""

    default_code = ErrorCode.VALIDATION_ERROR


class UnauthorizedError(DomainException):
    """The requester may not act on the target resource."""

    default_code = ErrorCode.UNAUTHORIZED

    def __init__(
        self,
        message: str = "Unauthorized",
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)


class EntityNotFoundError(DomainException):
    """No stored record matches."""

    default_code = ErrorCode.ENTITY_NOT_FOUND


class DatabaseError(DomainException):
    """The store failed for a reason other than a missing row."""

    default_code = ErrorCode.DATABASE_ERROR

    def __init__(
        self,
        message: str = "Database operation failed",
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)
