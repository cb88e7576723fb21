"""Request-scoped projections of User.

Each projection constrains which fields a single operation may read or
write. They are built by the presentation layer and discarded after the
request.
"""

from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True)
class UserCreate:
    email: str
    password: str
    first_name: str = ""
    last_name: str = ""


@dataclass(frozen=True)
class UserLogin:
    email: str
    password: str


@dataclass(frozen=True)
class UserUpdate:
    """Partial update; a field left as None is not written."""

    first_name: str | None = None
    last_name: str | None = None
    password: str | None = None

    def provided_fields(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
