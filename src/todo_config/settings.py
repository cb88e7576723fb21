"""Runtime configuration for the todo backend.

Values come from the process environment first, then from one dotenv
file picked in this order:

- the path in ``TODO_ENV_FILE`` (relative paths resolve against the repo root)
- ``config/.env.dev``
- ``config/.env``

Only ``JWT_SECRET_KEY`` and ``POSTGRES_PASSWORD`` are mandatory.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _project_root() -> Path:
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if (candidate / "config").is_dir() or (candidate / "pyproject.toml").is_file():
            return candidate
    # Installed without the repo around it (e.g. a container image)
    return Path.cwd()


def get_config_dir() -> Path:
    return _project_root() / "config"


def _dotenv_path() -> Path | None:
    explicit = os.environ.get("TODO_ENV_FILE")
    if explicit:
        path = Path(explicit)
        if not path.is_absolute():
            path = _project_root() / path
        if path.exists():
            return path

    for name in (".env.dev", ".env"):
        path = get_config_dir() / name
        if path.exists():
            return path
    return None


class Settings(BaseSettings):
    """All tunables of the API, the CLI and the auth services."""

    model_config = SettingsConfigDict(
        env_file=_dotenv_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Required; startup fails without them
    jwt_secret_key: SecretStr
    postgres_password: SecretStr

    app_name: str = "Todo"

    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_db: str = "todo"

    # DATABASE_URL wins over the POSTGRES_* parts, e.g. sqlite+aiosqlite:///./data/todo.db
    database_url_override: str | None = Field(
        default=None,
        validation_alias=AliasChoices("database_url", "database_url_override"),
    )

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    api_cors_origins: str = ""  # comma-separated; empty disables CORS

    jwt_access_token_expire_hours: int = 24
    bcrypt_rounds: int = 12

    log_level: str = "INFO"

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_cors_origins(cls, v: Any) -> str:
        if isinstance(v, list):
            return ",".join(v)
        return str(v) if v else ""

    @field_validator("database_url_override", mode="before")
    @classmethod
    def _use_asyncpg_scheme(cls, v: Any) -> Any:
        """Hosting providers hand out postgresql:// but asyncpg needs its own scheme."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v or None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        password = self.postgres_password.get_secret_value()
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Settings for this process, read once."""
    return Settings()  # type: ignore[call-arg]


def clear_settings_cache() -> None:
    """Force the next get_settings() call to re-read the environment."""
    get_settings.cache_clear()
