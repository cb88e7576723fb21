"""User aggregate."""

from datetime import datetime
from uuid import UUID, uuid4

from todo.domain.shared.time import utc_now


class User:
    """
    User aggregate root.

    The identifier is assigned once at construction and never changes.
    Profile fields are mutated through the repository's partial update,
    so the aggregate itself only exposes read access.
    """

    def __init__(
        self,
        email: str,
        password_hash: str,
        first_name: str = "",
        last_name: str = "",
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._email = self.normalize_email(email)
        self._password_hash = password_hash
        self._first_name = first_name
        self._last_name = last_name
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @staticmethod
    def normalize_email(email: str) -> str:
        return email.strip().lower()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def full_name(self) -> str:
        return f"{self._first_name} {self._last_name}".strip()

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @classmethod
    def create(
        cls,
        email: str,
        password_hash: str,
        first_name: str = "",
        last_name: str = "",
    ) -> "User":
        return cls(
            email=email,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
        )

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        email: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email})"
