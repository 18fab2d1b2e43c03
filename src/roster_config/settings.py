"""Roster configuration.

Values come from the process environment first, then from one dotenv file,
then from the defaults below. The dotenv file is the first existing one of:

- the path in ``ROSTER_ENV_FILE`` (absolute, or relative to the repo root)
- ``config/.env.dev`` for local work
- ``config/.env`` for deployments

Field names map to upper-case variables (``postgres_host`` reads
``POSTGRES_HOST``).
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

MIN_BCRYPT_ROUNDS = 4
MAX_BCRYPT_ROUNDS = 31


def _repo_root() -> Path:
    """Nearest ancestor holding a ``config`` dir or a ``.git`` dir."""
    here = Path(__file__).resolve()
    for candidate in here.parents:
        if (candidate / "config").is_dir() or (candidate / ".git").is_dir():
            return candidate
    return here.parents[2]


def get_config_dir() -> Path:
    return _repo_root() / "config"


def _env_file() -> Path | None:
    candidates: list[Path] = []

    explicit = os.environ.get("ROSTER_ENV_FILE")
    if explicit:
        path = Path(explicit)
        candidates.append(path if path.is_absolute() else _repo_root() / path)

    config_dir = get_config_dir()
    candidates += [config_dir / ".env.dev", config_dir / ".env"]

    return next((path for path in candidates if path.exists()), None)


class Settings(BaseSettings):
    """Typed view of the Roster environment."""

    model_config = SettingsConfigDict(
        env_file=_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Roster"
    debug: bool = False

    # DATABASE_DSN wins over the POSTGRES_* parts when set
    database_dsn: str | None = None
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: SecretStr = SecretStr("")
    postgres_db: str = "roster"
    db_echo: bool = False

    bcrypt_rounds: int = 12
    password_min_length: int = 6

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    # Comma-separated; empty disables cross-origin requests
    api_cors_origins: str = ""

    log_level: str = "INFO"

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_cors_origins(cls, value: Any) -> str:
        if isinstance(value, (list, tuple)):
            return ",".join(value)
        return str(value) if value else ""

    @field_validator("bcrypt_rounds")
    @classmethod
    def _check_bcrypt_rounds(cls, value: int) -> int:
        if not MIN_BCRYPT_ROUNDS <= value <= MAX_BCRYPT_ROUNDS:
            msg = (
                f"bcrypt_rounds must be between {MIN_BCRYPT_ROUNDS} "
                f"and {MAX_BCRYPT_ROUNDS}"
            )
            raise ValueError(msg)
        return value

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """SQLAlchemy URL for the async engine."""
        if self.database_dsn:
            return self.database_dsn
        password = self.postgres_password.get_secret_value()
        return (
            "postgresql+asyncpg://"
            f"{self.postgres_user}:{password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        return [
            origin.strip()
            for origin in self.api_cors_origins.split(",")
            if origin.strip()
        ]

    @property
    def database_type(self) -> str:
        """Backend name from the URL scheme, e.g. ``postgresql`` or ``sqlite``."""
        scheme = self.database_url.split(":", 1)[0]
        return scheme.split("+", 1)[0]


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def clear_settings_cache() -> None:
    """Forget the cached Settings so the next call re-reads the environment."""
    get_settings.cache_clear()
