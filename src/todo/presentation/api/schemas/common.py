"""Common schemas shared across API endpoints."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class SuccessResponse(BaseModel, Generic[T]):
    """Envelope wrapping every successful payload as {"data": ...}."""

    data: T


class FieldErrorDetail(BaseModel):
    """One failed field of a request payload."""

    field: str
    message: str
    type: str


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    detail: str = Field(..., description="Error message")
    code: str | None = Field(None, description="Error code for programmatic handling")
    errors: list[FieldErrorDetail] | None = Field(
        None,
        description="Per-field details for validation errors",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"detail": "User not found", "code": "USER_NOT_FOUND"},
        },
    )


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
    api_versions: list[str] = Field(default_factory=lambda: ["v1"])
