"""Application factory for the todo HTTP API.

User routes are mounted under ``/api/v1/users``; ``/health`` and ``/``
stay unversioned.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todo import __version__
from todo.presentation.api.config import get_api_settings
from todo.presentation.api.dependencies import create_tables, get_engine
from todo.presentation.api.exception_handlers import setup_exception_handlers
from todo.presentation.api.routers import users_router
from todo.presentation.api.schemas import HealthResponse
from todo_config.settings import Settings, get_settings

API_VERSION = __version__
API_V1_PREFIX = "/api/v1"

_QUIET_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "aiosqlite")

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _configure_logging(level_name: str) -> None:
    """Log to stdout as ``time | LEVEL | logger | message``.

    Runs once per level name, so building several apps in one process
    (tests) does not stack handlers.
    """
    level = getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in ("todo", "todo_auth"):
        logging.getLogger(name).setLevel(level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


OPENAPI_TAGS = [
    {
        "name": "Users",
        "description": (
            "Registration and login are public; every other route needs a "
            "bearer token, and updates are limited to the caller's own record."
        ),
    },
    {"name": "Health", "description": "Liveness probe."},
    {"name": "Info", "description": "Service metadata."},
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    logger.info("Todo API %s starting", API_VERSION)
    await create_tables()
    yield
    await get_engine().dispose()
    logger.info("Todo API stopped, connection pool closed")


def create_v1_router() -> APIRouter:
    router = APIRouter()
    router.include_router(users_router, prefix="/users", tags=["Users"])
    return router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API.

    Parameters
    ----------
    settings
        Used instead of the environment-derived settings for this app and
        for dependencies resolved through ``get_api_settings`` (JWT and
        password services). The database engine always comes from the
        global ``get_settings()``; tests override ``get_db_session``
        instead.
    """
    settings = settings or get_settings()
    _configure_logging(settings.log_level)

    docs_enabled = settings.api_debug
    app = FastAPI(
        title=f"{settings.app_name} API",
        description="User registration, login and CRUD.",
        version=API_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )
    app.dependency_overrides[get_api_settings] = lambda: settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_exception_handlers(app)
    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="healthy", version=API_VERSION)

    @app.get("/", tags=["Info"])
    async def info() -> dict:
        return {
            "name": f"{settings.app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if docs_enabled else None,
            "api_base": API_V1_PREFIX,
            "endpoints": {
                "health": "/health",
                "users": f"{API_V1_PREFIX}/users",
            },
        }

    return app


# Module-level instance for `uvicorn todo.presentation.api.app:app`
app = create_app()
