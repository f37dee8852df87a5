"""GiftRoom settings.

Every field can be set through an environment variable of the same name
(case-insensitive). A dotenv file is read as a fallback; the first existing
candidate wins:

- the path in ``GIFTROOM_ENV_FILE`` (relative paths resolve against the
  project root)
- ``config/.env.dev`` for local development
- ``config/.env`` for deployments
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterator

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "GIFTROOM_ENV_FILE"


def _find_project_root() -> Path:
    """Nearest ancestor holding ``config/`` or ``pyproject.toml``."""
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if (candidate / "config").is_dir():
            return candidate
        if (candidate / "pyproject.toml").is_file():
            return candidate
    return here.parents[1]


def get_config_dir() -> Path:
    return _find_project_root() / "config"


def _env_file_candidates() -> Iterator[Path]:
    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        yield path if path.is_absolute() else _find_project_root() / path
    yield get_config_dir() / ".env.dev"
    yield get_config_dir() / ".env"


def _resolve_env_file_path() -> Path | None:
    return next((p for p in _env_file_candidates() if p.exists()), None)


class Settings(BaseSettings):
    """Runtime configuration for the API, the CLI and the demo seeder."""

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "GiftRoom"
    debug: bool = False

    # PostgreSQL connection, used unless DATABASE_DSN is set
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: SecretStr = SecretStr("")
    postgres_db: str = "giftroom"

    # e.g. sqlite+aiosqlite:///./data/giftroom.db
    database_dsn: str | None = None
    database_echo: bool = False

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    # Comma separated; empty disables cross-origin requests
    api_cors_origins: str = ""

    log_level: str = "INFO"

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_cors_origins(cls, v: Any) -> str:
        if isinstance(v, (list, tuple)):
            return ",".join(v)
        return str(v) if v else ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """SQLAlchemy async URL: the explicit DSN or one built for asyncpg."""
        if self.database_dsn:
            return self.database_dsn
        password = self.postgres_password.get_secret_value()
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]

    @property
    def database_type(self) -> str:
        """Dialect name of ``database_url``, e.g. ``postgresql`` or ``sqlite``."""
        scheme = self.database_url.split(":", 1)[0]
        return scheme.split("+", 1)[0]


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def clear_settings_cache() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
