"""Request-scoped wiring for the user API.

The engine and session maker are process-wide; sessions, repositories and
services are built per request. Handlers receive them through the
``Annotated`` aliases at the bottom of each section.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from todo.application.context import Requester
from todo.application.ports import UserServicePort
from todo.application.services import UserService
from todo.infrastructure.persistence.sqlalchemy.models import Base
from todo.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)
from todo.presentation.api.config import get_api_settings
from todo_auth import InvalidTokenError, JWTService, PasswordHashingService
from todo_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# auto_error=False so a missing header reaches get_requester as None
bearer_scheme = HTTPBearer(auto_error=False)


# --- Database ----------------------------------------------------------------


def _prepare_sqlite_path(url: str) -> None:
    if url.startswith("sqlite") and ":memory:" not in url:
        Path(url.split("///")[-1]).parent.mkdir(parents=True, exist_ok=True)


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """Process-wide async engine for the configured database URL."""
    url = get_settings().database_url
    _prepare_sqlite_path(url)
    return create_async_engine(url, echo=False, pool_pre_ping=True)


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Yield one session per request.

    Handlers commit their writes explicitly. Whatever is still pending when
    the request ends is rolled back as the session closes.
    """
    async with get_session_maker()() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def create_tables() -> None:
    """Create any missing tables; existing tables are left alone."""
    logger.info("Creating missing database tables")
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready")


# --- Services ----------------------------------------------------------------


def get_jwt_service(
    settings: Settings = Depends(get_api_settings),
) -> JWTService:
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_password_service(
    settings: Settings = Depends(get_api_settings),
) -> PasswordHashingService:
    return PasswordHashingService(rounds=settings.bcrypt_rounds)


async def get_user_service(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> UserServicePort:
    """User service bound to this request's session."""
    return UserService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


UserServiceDep = Annotated[UserServicePort, Depends(get_user_service)]


# --- Authentication ----------------------------------------------------------


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_requester(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> Requester:
    """
    Resolve the caller from the bearer token.

    Raises
    ------
    HTTPException
        401 when the header is absent, the token does not verify, or it is
        not an access token
    """
    if credentials is None:
        raise _unauthorized("Authentication required")

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Rejected bearer token: %s", e.message)
        raise _unauthorized("Invalid or expired token") from e

    if not payload.is_access_token():
        raise _unauthorized("Invalid token type")

    return Requester.from_token(payload)


CurrentRequester = Annotated[Requester, Depends(get_requester)]
