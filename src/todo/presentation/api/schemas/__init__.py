"""API request and response schemas."""

from todo.presentation.api.schemas.common import (
    ErrorResponse,
    FieldErrorDetail,
    HealthResponse,
    SuccessResponse,
)
from todo.presentation.api.schemas.users import (
    TokenResponse,
    UserCreateRequest,
    UserLoginRequest,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "ErrorResponse",
    "FieldErrorDetail",
    "HealthResponse",
    "SuccessResponse",
    "TokenResponse",
    "UserCreateRequest",
    "UserLoginRequest",
    "UserResponse",
    "UserUpdateRequest",
]
