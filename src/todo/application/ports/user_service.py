"""UserServicePort - what the HTTP layer needs from the user service."""

from abc import ABC, abstractmethod
from uuid import UUID

from todo.application.dtos import UserCreate, UserLogin, UserUpdate
from todo.domain.user import User
from todo_auth import Token


class UserServicePort(ABC):
    """Service interface the user handlers delegate to."""

    @abstractmethod
    async def register(self, data: UserCreate) -> UUID:
        """Create a user and return its identifier."""

    @abstractmethod
    async def login(self, data: UserLogin) -> Token:
        """Check credentials and issue an access token."""

    @abstractmethod
    async def get_all_users(self) -> list[User]:
        """Return every user."""

    @abstractmethod
    async def get_user_by_id(self, user_id: UUID) -> User:
        """Return one user or raise UserNotFoundError."""

    @abstractmethod
    async def update_user(self, user_id: UUID, data: UserUpdate) -> None:
        """Apply a partial update."""

    @abstractmethod
    async def delete_user(self, user_id: UUID) -> None:
        """Remove a user."""
