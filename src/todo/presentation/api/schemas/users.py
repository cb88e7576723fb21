"""User schemas for request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from todo.application.dtos import UserCreate, UserLogin, UserUpdate
from todo.domain.user import User
from todo_auth import Token


class UserCreateRequest(BaseModel):
    """Request schema for user registration."""

    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(
        ...,
        min_length=8,
        max_length=72,
        description="Password (8-72 characters, at most 72 bytes as UTF-8)",
    )
    first_name: str = Field(default="", max_length=100)
    last_name: str = Field(default="", max_length=100)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "securepassword123",
                "first_name": "Ada",
                "last_name": "Lovelace",
            },
        },
    )

    def to_dto(self) -> UserCreate:
        return UserCreate(
            email=str(self.email),
            password=self.password,
            first_name=self.first_name,
            last_name=self.last_name,
        )


class UserLoginRequest(BaseModel):
    """Request schema for user login."""

    email: EmailStr
    password: str = Field(..., min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "securepassword123",
            },
        },
    )

    def to_dto(self) -> UserLogin:
        return UserLogin(email=str(self.email), password=self.password)


class UserUpdateRequest(BaseModel):
    """Request schema for a partial user update.

    Only the fields present in the body are written. Unknown fields are
    rejected so a typo never turns into a silent no-op.
    """

    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    password: str | None = Field(default=None, min_length=8, max_length=72)

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={"example": {"first_name": "Grace"}},
    )

    def to_dto(self) -> UserUpdate:
        return UserUpdate(**self.model_dump(exclude_unset=True))


class UserResponse(BaseModel):
    """Response schema for user data. The password hash is never exposed."""

    id: UUID
    email: str
    first_name: str
    last_name: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class TokenResponse(BaseModel):
    """Response schema for an issued access token."""

    access_token: str
    token_type: str = Field(default="bearer")
    expires_in: int
    created_at: datetime

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9.xxx",
                "token_type": "bearer",
                "expires_in": 86400,
                "created_at": "2024-12-05T10:30:00Z",
            },
        },
    )

    @classmethod
    def from_token(cls, token: Token) -> "TokenResponse":
        return cls(
            access_token=token.access_token,
            token_type=token.token_type,
            expires_in=token.expires_in,
            created_at=token.created_at,
        )
