"""Runtime configuration for Masterdom.

Every field maps to an upper-case environment variable of the same name.
Process environment wins over any ``.env`` file. The file itself is picked
from ``MASTERDOM_ENV_FILE`` when set, otherwise ``config/.env.dev`` and then
``config/.env`` below the project root.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "MASTERDOM_ENV_FILE"


def _project_root() -> Path:
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if (candidate / "config").is_dir() or (candidate / "pyproject.toml").is_file():
            return candidate
        if candidate == Path("/app"):
            return candidate
    return Path(__file__).resolve().parents[2]


def get_config_dir() -> Path:
    """Directory holding the ``.env`` files."""
    return _project_root() / "config"


def _locate_env_file() -> Path | None:
    explicit = os.environ.get(ENV_FILE_VARIABLE)
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
    """Typed view of the environment.

    ``jwt_secret_key`` and ``postgres_password`` have no defaults, so
    construction fails loudly when either is missing.
    """

    model_config = SettingsConfigDict(
        env_file=_locate_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Secrets
    jwt_secret_key: SecretStr
    postgres_password: SecretStr

    app_name: str = "Masterdom"

    # PostgreSQL
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_db: str = "masterdom"
    # Replaces the assembled URL entirely, e.g. sqlite+aiosqlite:///./masterdom.db
    database_url_override: str | None = None

    # HTTP
    api_host: str = "0.0.0.0"  # NOQA: S104
    api_port: int = 8000
    api_debug: bool = False
    api_cors_origins: str = ""  # no origins allowed unless listed
    api_request_timeout_seconds: float = 30.0

    # Auth
    jwt_access_token_expire_hours: int = 24
    bcrypt_rounds: int = 12
    # Registers as admin and is the only account that may demote admins
    super_admin_email: str | None = None

    log_level: str = "INFO"

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_cors_origins(cls, v: Any) -> str:
        if isinstance(v, (list, tuple)):
            return ",".join(v)
        return str(v) if v else ""

    @field_validator("super_admin_email", mode="before")
    @classmethod
    def _normalize_super_admin_email(cls, v: Any) -> str | None:
        if v is None or not str(v).strip():
            return None
        return str(v).strip().lower()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """SQLAlchemy URL, from the override or the ``POSTGRES_*`` parts."""
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
        return [
            origin.strip()
            for origin in self.api_cors_origins.split(",")
            if origin.strip()
        ]


@lru_cache()
def get_settings() -> Settings:
    """Process-wide settings, built on first use."""
    return Settings()  # type: ignore[call-arg]


def clear_settings_cache() -> None:
    """Forget the cached settings so the next call rereads the environment."""
    get_settings.cache_clear()
