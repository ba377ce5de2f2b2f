"""Discipline configuration.

Every field can be set through an environment variable of the same name
(case-insensitive), e.g. ``JWT_SECRET_KEY`` or ``DATABASE_BACKEND``.
Environment variables win over the first env file found among:

- the file named by ``DISCIPLINE_ENV_FILE`` (relative to the project root
  unless absolute)
- ``config/.env.dev`` for local development
- ``config/.env`` for deployments
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "DISCIPLINE_ENV_FILE"
_ROOT_MARKERS = ("pyproject.toml", ".git", "config")

# bcrypt accepts cost factors 4..31
_BCRYPT_MIN_ROUNDS = 4
_BCRYPT_MAX_ROUNDS = 31


def _find_project_root() -> Path:
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return here.parent.parent


def get_config_dir() -> Path:
    """Directory holding the ``.env`` files."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    candidates: list[Path] = []

    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        candidates.append(path if path.is_absolute() else _find_project_root() / path)

    config_dir = get_config_dir()
    candidates += [config_dir / ".env.dev", config_dir / ".env"]

    return next((path for path in candidates if path.exists()), None)


class Settings(BaseSettings):
    """Flat settings object shared by the API, the CLI and the tests."""

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Token signing secret; there is no default on purpose
    jwt_secret_key: SecretStr
    jwt_access_token_expire_hours: int = 1

    app_name: str = "Discipline"

    # Database
    database_backend: Literal["postgresql", "sqlite"] = "postgresql"
    sqlite_path: str = "data/discipline.db"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: SecretStr | None = None
    postgres_db: str = "discipline"

    # Upper bound for a single storage call, in seconds (None disables it)
    storage_timeout_seconds: float | None = 5.0

    # HTTP API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    api_cors_origins: str = ""  # comma separated; empty disables CORS

    bcrypt_rounds: int = 12

    # Days the newest check may lag behind today while a streak is current
    streak_grace_days: int = 1

    log_level: str = "INFO"

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_cors_origins(cls, v: Any) -> str:
        if isinstance(v, (list, tuple)):
            return ",".join(v)
        return str(v) if v else ""

    @field_validator("jwt_secret_key")
    @classmethod
    def _require_secret(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value():
            msg = "JWT_SECRET_KEY must not be empty"
            raise ValueError(msg)
        return v

    @field_validator("jwt_access_token_expire_hours")
    @classmethod
    def _positive_token_lifetime(cls, v: int) -> int:
        if v < 1:
            msg = "jwt_access_token_expire_hours must be at least 1"
            raise ValueError(msg)
        return v

    @field_validator("storage_timeout_seconds")
    @classmethod
    def _positive_timeout(cls, v: float | None) -> float | None:
        if v is not None and v <= 0:
            msg = "storage_timeout_seconds must be positive (or unset)"
            raise ValueError(msg)
        return v

    @field_validator("bcrypt_rounds")
    @classmethod
    def _bcrypt_cost_range(cls, v: int) -> int:
        if not (_BCRYPT_MIN_ROUNDS <= v <= _BCRYPT_MAX_ROUNDS):
            msg = (
                f"bcrypt_rounds must be between {_BCRYPT_MIN_ROUNDS} "
                f"and {_BCRYPT_MAX_ROUNDS}"
            )
            raise ValueError(msg)
        return v

    @field_validator("streak_grace_days")
    @classmethod
    def _non_negative_grace(cls, v: int) -> int:
        if v < 0:
            msg = "streak_grace_days cannot be negative"
            raise ValueError(msg)
        return v

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """SQLAlchemy async URL for the selected backend."""
        if self.database_backend == "sqlite":
            return f"sqlite+aiosqlite:///{self.sqlite_path}"

        password = (
            self.postgres_password.get_secret_value() if self.postgres_password else ""
        )
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]

    def ensure_sqlite_directory(self) -> None:
        """Create the parent directory of the SQLite file, if SQLite is used."""
        if self.database_backend == "sqlite":
            Path(self.sqlite_path).parent.mkdir(parents=True, exist_ok=True)


@lru_cache()
def get_settings() -> Settings:
    """Process-wide settings, read once from the environment."""
    return Settings()  # type: ignore[call-arg]  # pydantic-settings loads from env


def clear_settings_cache() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
