"""Requester - request-scoped identity of the authenticated caller."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from todo_auth import TokenPayload


@dataclass(frozen=True)
class Requester:
    """
    Immutable identity of the current authenticated user.

    Created once per request from a verified access token and handed to
    the handlers that need to compare it against a target resource.
    """

    user_id: UUID
    email: str

    @classmethod
    def from_token(cls, payload: TokenPayload) -> Requester:
        return cls(user_id=payload.user_id, email=payload.email)

    def is_self(self, user_id: UUID) -> bool:
        return self.user_id == user_id

    def __str__(self) -> str:
        return f"Requester({self.email})"
