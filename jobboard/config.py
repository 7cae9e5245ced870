from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


# Load project-root .env early so both pydantic-settings and any direct os.getenv access
# see consistent values, even if the process CWD is not the repo root.
_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_IN_TEST = (os.getenv("ENVIRONMENT") or "").lower() == "test" or bool(os.getenv("PYTEST_CURRENT_TEST"))
if _ENV_PATH.exists() and not _IN_TEST:
    load_dotenv(dotenv_path=_ENV_PATH, override=True)


def _parse_origins(raw: Any) -> list[str]:
    if raw is None:
        return []

    items: list[Any]
    if isinstance(raw, (list, tuple, set)):
        items = list(raw)
    elif isinstance(raw, str):
        s = raw.strip()
        if not s:
            return []

        # Support JSON array string or comma-separated string.
        if s.startswith("["):
            try:
                parsed = json.loads(s)
                items = parsed if isinstance(parsed, list) else [parsed]
            except json.JSONDecodeError:
                items = [p.strip() for p in s.strip("[]").split(",")]
        else:
            items = [p.strip() for p in s.split(",")]
    else:
        items = [raw]

    return [str(item).strip() for item in items if item is not None and str(item).strip()]


class Settings(BaseSettings):
    app_name: str = Field(default="Job Board API")
    api_prefix: str = Field(default="/api")
    version: str = Field(default="1.0.0")
    environment: str = Field(default="development")
    debug: bool = Field(default=False)

    # DB_URL accepts any SQLAlchemy URL (sqlite:///..., mysql+pymysql://...).
    db_url: str | None = Field(default=None)
    # None means "create tables only when running against sqlite".
    auto_create_tables: bool | None = Field(default=None)

    jwt_secret: str = Field(default="change-me")
    jwt_algorithm: str = Field(default="HS256")
    access_token_expire_minutes: int = Field(default=60 * 24 * 7)

    # NoDecode lets the validator below accept comma-separated values as well as JSON.
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"],
    )

    # Any string the `limits` package understands, e.g. "100 per 15 minutes".
    rate_limit: str = Field(default="100 per 15 minutes")
    rate_limit_enabled: bool = Field(default=True)

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _validate_cors_origins(cls, v: Any) -> list[str]:
        return _parse_origins(v)

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def is_production(self) -> bool:
        return (self.environment or "").lower() == "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()


def build_sqlalchemy_db_url(settings: Settings) -> str:
    if settings.db_url:
        return settings.db_url

    # In development (and tests) default to a local sqlite file unless explicitly configured.
    if settings.environment.lower() in ("development", "test"):
        return "sqlite:///./dev.db"

    raise ValueError("DB_URL must be set outside development")


def should_create_tables(settings: Settings) -> bool:
    """Return True if the ORM tables should be created at startup.

    Shared MySQL databases are migrated explicitly (scripts/create_orm_tables.py);
    sqlite files are created on the fly for local runs and tests.
    """

    if settings.auto_create_tables is not None:
        return settings.auto_create_tables
    return build_sqlalchemy_db_url(settings).startswith("sqlite")
