"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from todo.domain.shared.exceptions import DatabaseError, ValidationError
from todo.domain.shared.time import ensure_tz_aware, utc_now
from todo.domain.user import (
    EmailAlreadyExistsError,
    User,
    UserNotFoundError,
    UserRepository,
)
from todo.infrastructure.persistence.sqlalchemy.models import UserModel
from todo.infrastructure.persistence.sqlalchemy.repositories._utils import (
    is_unique_violation,
    translate_db_errors,
)

logger = logging.getLogger(__name__)

_IMMUTABLE_FIELDS = frozenset({"id", "created_at"})


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    Each method issues a single statement and flushes; committing is left
    to the owner of the session.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, user: User) -> None:
        model = self._map_to_model(user)

        with translate_db_errors("save"):
            try:
                self._session.add(model)
                await self._session.flush()
            except IntegrityError as e:
                if is_unique_violation(e):
                    raise EmailAlreadyExistsError(user.email) from e
                raise

        logger.info("Created user: %s (email: %s)", user.id, user.email)

    async def get_user(self, conditions: dict[str, Any]) -> User:
        filters = self._normalize_conditions(conditions)

        with translate_db_errors("get_user"):
            stmt = select(UserModel).filter_by(**filters).limit(1)
            result = await self._session.execute(stmt)
            model = result.scalars().first()

        if model is None:
            raise UserNotFoundError()

        return self._map_to_domain(model)

    async def get_all(self) -> list[User]:
        with translate_db_errors("get_all"):
            stmt = select(UserModel).order_by(UserModel.created_at)
            result = await self._session.execute(stmt)
            models = result.scalars().all()

        return [self._map_to_domain(model) for model in models]

    async def get_by_id(self, user_id: UUID) -> User:
        with translate_db_errors("get_by_id"):
            stmt = select(UserModel).where(UserModel.id == user_id)
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()

        if model is None:
            raise UserNotFoundError(str(user_id))

        return self._map_to_domain(model)

    async def update(self, user_id: UUID, fields: dict[str, Any]) -> None:
        values = self._normalize_conditions(fields)

        immutable = _IMMUTABLE_FIELDS.intersection(values)
        if immutable:
            msg = f"Cannot modify immutable fields: {', '.join(sorted(immutable))}"
            raise ValidationError(msg)

        if not values:
            # Nothing to write; still report a missing user.
            await self.get_by_id(user_id)
            return

        values["updated_at"] = utc_now()

        with translate_db_errors("update"):
            try:
                stmt = (
                    update(UserModel)
                    .where(UserModel.id == user_id)
                    .values(**values)
                )
                result = await self._session.execute(stmt)
            except IntegrityError as e:
                if "email" in values and is_unique_violation(e):
                    raise EmailAlreadyExistsError(values["email"]) from e
                raise

        if result.rowcount == 0:
            raise UserNotFoundError(str(user_id))

        logger.debug("Updated user %s fields: %s", user_id, sorted(values))

    async def delete(self, user_id: UUID) -> None:
        with translate_db_errors("delete"):
            stmt = delete(UserModel).where(UserModel.id == user_id)
            result = await self._session.execute(stmt)

        if result.rowcount == 0:
            raise UserNotFoundError(str(user_id))

        logger.info("Deleted user: %s", user_id)

    def _normalize_conditions(self, conditions: dict[str, Any]) -> dict[str, Any]:
        columns = UserModel.__table__.columns.keys()
        unknown = set(conditions) - set(columns)
        if unknown:
            msg = f"Unknown user fields: {', '.join(sorted(unknown))}"
            raise DatabaseError(msg, details={"fields": sorted(unknown)})

        normalized = dict(conditions)
        if isinstance(normalized.get("email"), str):
            normalized["email"] = User.normalize_email(normalized["email"])
        return normalized

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            first_name=model.first_name,
            last_name=model.last_name,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            email=user.email,
            password_hash=user.password_hash,
            first_name=user.first_name,
            last_name=user.last_name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
