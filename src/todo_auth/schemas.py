"""Data classes exchanged by the auth services."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded contents of a verified JWT."""

    user_id: UUID
    email: str
    exp: datetime
    token_type: str = "access"

    def is_access_token(self) -> bool:
        return self.token_type == "access"


@dataclass(frozen=True)
class Token:
    """Signed access token handed to a client after login."""

    access_token: str
    expires_in: int
    created_at: datetime
    token_type: str = "bearer"
