"""StoreRate settings, read from the environment and ``config/.env`` files.

OS environment variables win over ``config/.env.dev``, which wins over
``config/.env``. Paths are relative to the working directory and missing
files are skipped.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """StoreRate configuration."""

    model_config = SettingsConfigDict(
        env_file=("config/.env", "config/.env.dev"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Required; tokens cannot be signed without it
    jwt_secret_key: SecretStr

    app_name: str = "StoreRate"

    # DATABASE_URL_OVERRIDE (e.g. sqlite+aiosqlite:///...) wins over POSTGRES_*
    database_url_override: str = ""
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: SecretStr = SecretStr("")
    postgres_db: str = "storerate"
    database_timeout_seconds: float = 10.0
    database_pool_size: int = 10

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

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql+asyncpg://{self.postgres_user}:"
            f"{self.postgres_password.get_secret_value()}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]


def clear_settings_cache() -> None:
    get_settings.cache_clear()
