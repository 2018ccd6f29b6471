from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any
from urllib.parse import parse_qsl, urlencode, urlparse, urlunparse

from dotenv import load_dotenv
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from jobsearch.enums import Language


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
            except ValueError:
                items = [p.strip() for p in s.strip("[]").split(",")]
        else:
            items = [p.strip() for p in s.split(",")]
    else:
        items = [raw]

    return [str(item).strip() for item in items if item is not None and str(item).strip()]


class Settings(BaseSettings):
    app_name: str = Field(default="Job Search API")
    api_prefix: str = Field(default="/api")
    version: str = Field(default="0.1.0")
    environment: str = Field(default="development")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # Hosted Postgres (Supabase) connection string. Takes precedence over the DB_* parts.
    database_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("DATABASE_URL", "SUPABASE_DB_URL"),
    )
    db_host: str = Field(default="localhost", validation_alias="DB_HOST")
    db_port: int = Field(default=5432, validation_alias="DB_PORT")
    db_name: str = Field(default="postgres", validation_alias="DB_NAME")
    db_user: str = Field(default="postgres", validation_alias="DB_USER")
    db_password: str = Field(default="postgres", validation_alias="DB_PASSWORD")
    db_sslmode: str | None = Field(default=None, validation_alias="DB_SSLMODE")
    # 0 disables the per-connection statement_timeout.
    db_statement_timeout_ms: int = Field(default=0, ge=0, validation_alias="DB_STATEMENT_TIMEOUT_MS")

    default_language: Language = Field(default=Language.ENGLISH, validation_alias="DEFAULT_LANGUAGE")
    default_page_size: int = Field(default=20, ge=1, validation_alias="DEFAULT_PAGE_SIZE")
    max_page_size: int = Field(default=100, ge=1, validation_alias="MAX_PAGE_SIZE")

    # JSON array string or comma-separated list.
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"],
        validation_alias="CORS_ORIGINS",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _validate_cors_origins(cls, v: Any) -> list[str]:
        return _parse_origins(v)

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()


def normalize_postgres_url(url: str, *, sslmode: str | None = None) -> str:
    """Rewrite a libpq-style URL into a SQLAlchemy psycopg URL.

    Supabase hands out ``postgres://`` URLs, sometimes with ``pgbouncer=true`` which
    libpq rejects. Non-postgres URLs are returned unchanged.
    """

    if not url or not url.startswith(("postgres://", "postgresql://", "postgresql+psycopg://")):
        return url

    parsed = urlparse(url)
    query_pairs = [(k, v) for k, v in parse_qsl(parsed.query, keep_blank_values=True) if k.lower() != "pgbouncer"]
    if sslmode and not any(k.lower() == "sslmode" for k, _ in query_pairs):
        query_pairs.append(("sslmode", sslmode))

    return urlunparse(parsed._replace(scheme="postgresql+psycopg", query=urlencode(query_pairs)))


def build_sqlalchemy_db_url(settings: Settings) -> str:
    if settings.database_url:
        return normalize_postgres_url(settings.database_url, sslmode=settings.db_sslmode)

    # In development, default to sqlite unless a database is explicitly configured.
    if settings.environment.lower() == "development":
        return "sqlite:///./dev.db"

    url = (
        f"postgresql+psycopg://{settings.db_user}:{settings.db_password}"
        f"@{settings.db_host}:{settings.db_port}/{settings.db_name}"
    )
    if settings.db_sslmode:
        url += f"?sslmode={settings.db_sslmode}"
    return url
