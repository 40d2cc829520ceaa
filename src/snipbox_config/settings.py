"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. SNIPBOX_ENV_FILE environment variable (path to a .env file)
3. config/.env.dev - local development
4. config/.env - production/Docker

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VAR = "SNIPBOX_ENV_FILE"
ENV_FILE_NAMES = (".env.dev", ".env")


def _project_root() -> Path:
    """Nearest ancestor holding a ``config`` directory or ``pyproject.toml``.

    Inside the container image the project lives in ``/app``.
    """
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if (candidate / "config").is_dir() or (candidate / "pyproject.toml").is_file():
            return candidate
        if candidate == Path("/app"):
            return candidate
    return here.parents[1]


def get_config_dir() -> Path:
    return _project_root() / "config"


def _env_file() -> Path | None:
    """First existing env file: SNIPBOX_ENV_FILE, then config/.env.dev, config/.env."""
    candidates: list[Path] = []

    explicit = os.environ.get(ENV_FILE_VAR)
    if explicit:
        path = Path(explicit)
        candidates.append(path if path.is_absolute() else _project_root() / path)

    candidates.extend(get_config_dir() / name for name in ENV_FILE_NAMES)
    return next((path for path in candidates if path.is_file()), None)


class Settings(BaseSettings):
    """Application configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (config/.env.dev or config/.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "Snipbox"
    debug: bool = False

    # Database (POSTGRES_ prefix)
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: SecretStr = SecretStr("")
    postgres_db: str = "snipbox"
    # Full URL override, e.g. sqlite+aiosqlite:///./data/snipbox.db
    database_url_override: str | None = None
    db_operation_timeout_seconds: float | None = Field(default=5.0, gt=0)

    # API (API_ prefix)
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_debug: bool = False

    # Sessions
    session_lifetime_hours: int = Field(default=12, gt=0)
    session_cookie_name: str = "session"
    session_cookie_secure: bool = True
    session_cookie_samesite: Literal["lax", "strict", "none"] = "lax"

    # Credentials
    password_hash_rounds: int = Field(default=12, ge=4, le=31)

    # Snippets
    latest_snippets_limit: int = Field(default=5, gt=0)

    # Logging (LOG_ prefix)
    log_level: str = "INFO"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """Construct the database URL from components."""
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql+asyncpg://{self.postgres_user}:"
            f"{self.postgres_password.get_secret_value()}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def database_type(self) -> str:
        """Database backend name derived from the URL scheme."""
        return self.database_url.split(":", 1)[0].split("+", 1)[0]


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
