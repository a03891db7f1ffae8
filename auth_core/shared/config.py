from __future__ import annotations

import os
from dataclasses import dataclass
from urllib.parse import quote_plus

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _bool(name: str, default: str) -> bool:
    return (_env(name, default) or "").strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    db_host: str
    db_port: int
    db_name: str
    db_user: str
    db_password: str
    db_ssl: bool
    db_pool_size: int
    db_timeout_ms: int
    postgres_dsn: str
    redis_host: str
    redis_port: int
    redis_password: str | None
    redis_db: int
    redis_prefix: str
    jwt_secret: str
    jwt_access_ttl_seconds: int
    jwt_refresh_ttl_days: int
    enforce_credential_policy: bool
    log_level: str


def _build_postgres_dsn(*, host: str, port: int, name: str, user: str, password: str) -> str:
    credentials = quote_plus(user)
    if password:
        credentials = f"{credentials}:{quote_plus(password)}"
    return f"postgresql+psycopg://{credentials}@{host}:{port}/{name}"


def get_settings() -> Settings:
    db_host = _env("DB_HOST", "localhost")
    db_port = int(_env("DB_PORT", "5432"))
    db_name = _env("DB_NAME", "product_sample")
    db_user = _env("DB_USER", "postgres")
    db_password = _env("DB_PASSWORD", "")
    postgres_dsn = _env("POSTGRES_DSN") or _build_postgres_dsn(
        host=db_host,
        port=db_port,
        name=db_name,
        user=db_user,
        password=db_password,
    )
    return Settings(
        db_host=db_host,
        db_port=db_port,
        db_name=db_name,
        db_user=db_user,
        db_password=db_password,
        db_ssl=_bool("DB_SSL", "false"),
        db_pool_size=int(_env("DB_POOL_SIZE", "10")),
        db_timeout_ms=int(_env("DB_TIMEOUT", "30000")),
        postgres_dsn=postgres_dsn,
        redis_host=_env("REDIS_HOST", ""),
        redis_port=int(_env("REDIS_PORT", "6379")),
        redis_password=_env("REDIS_PASSWORD") or None,
        redis_db=int(_env("REDIS_DB", "0")),
        redis_prefix=_env("REDIS_PREFIX", "app:"),
        jwt_secret=_env("JWT_SECRET", ""),
        jwt_access_ttl_seconds=int(_env("JWT_ACCESS_TTL_SECONDS", "3600")),
        jwt_refresh_ttl_days=int(_env("JWT_REFRESH_TTL_DAYS", "30")),
        enforce_credential_policy=_bool("ENFORCE_CREDENTIAL_POLICY", "true"),
        log_level=(_env("LOG_LEVEL", "INFO") or "INFO").upper(),
    )
