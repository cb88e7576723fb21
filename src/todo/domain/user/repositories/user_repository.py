"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from todo.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Lookups raise UserNotFoundError when nothing matches; every other store
    failure surfaces as DatabaseError.
    """

    @abstractmethod
    async def save(self, user: User) -> None:
        """Insert a new user."""

    @abstractmethod
    async def get_user(self, conditions: dict[str, Any]) -> User:
        """Find the first user matching all field/value pairs."""

    @abstractmethod
    async def get_all(self) -> list[User]:
        """List all users; an empty store yields an empty list."""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> User:
        """Find a user by their ID."""

    @abstractmethod
    async def update(self, user_id: UUID, fields: dict[str, Any]) -> None:
        """Write only the given fields of the user with this ID."""

    @abstractmethod
    async def delete(self, user_id: UUID) -> None:
        """Delete a user by ID."""
