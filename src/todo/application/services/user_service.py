"""User service for registration, login and user management."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from todo.application.dtos import UserCreate, UserLogin, UserUpdate
from todo.application.ports import UserServicePort
from todo.domain.shared.exceptions import ValidationError
from todo.domain.user import InvalidCredentialsError, User, UserNotFoundError
from todo_auth import JWTService, PasswordHashingService, Token, WeakPasswordError

if TYPE_CHECKING:
    from todo.domain.user import UserRepository

logger = logging.getLogger(__name__)


class UserService(UserServicePort):
    """
    Application service for users.

    Bridges todo_auth (password hashing, JWT tokens) with the User
    repository. Every method performs exactly one repository call.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def register(self, data: UserCreate) -> UUID:
        password_hash = self._hash_password(data.password)
        user = User.create(
            email=data.email,
            password_hash=password_hash,
            first_name=data.first_name,
            last_name=data.last_name,
        )
        await self._user_repo.save(user)

        logger.info("User registered: %s", user.email)
        return user.id

    async def login(self, data: UserLogin) -> Token:
        try:
            user = await self._user_repo.get_user(
                {"email": User.normalize_email(data.email)},
            )
        except UserNotFoundError as e:
            raise InvalidCredentialsError from e

        if not self._password_service.verify(data.password, user.password_hash):
            raise InvalidCredentialsError

        logger.info("User logged in: %s", user.email)
        return self._jwt_service.create_access_token(
            user_id=user.id,
            email=user.email,
        )

    async def get_all_users(self) -> list[User]:
        return await self._user_repo.get_all()

    async def get_user_by_id(self, user_id: UUID) -> User:
        return await self._user_repo.get_by_id(user_id)

    async def update_user(self, user_id: UUID, data: UserUpdate) -> None:
        fields = data.provided_fields()

        password = fields.pop("password", None)
        if password is not None:
            fields["password_hash"] = self._hash_password(password)

        await self._user_repo.update(user_id, fields)
        logger.info("User updated: %s", user_id)

    async def delete_user(self, user_id: UUID) -> None:
        await self._user_repo.delete(user_id)
        logger.info("User deleted: %s", user_id)

    def _hash_password(self, password: str) -> str:
        try:
            return self._password_service.hash(password)
        except WeakPasswordError as e:
            raise ValidationError(e.message) from e
