from __future__ import annotations

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


@lru_cache(maxsize=4)
def get_engine(dsn: str, pool_size: int = 10, connect_timeout_seconds: int = 30, ssl: bool = False):
    connect_args = {"connect_timeout": connect_timeout_seconds}
    if ssl:
        connect_args["sslmode"] = "require"
    return create_engine(
        dsn,
        future=True,
        pool_pre_ping=True,
        pool_size=pool_size,
        connect_args=connect_args,
    )


def create_schema(engine) -> None:
    from auth_core.infrastructure.db.models import users  # noqa: F401

    Base.metadata.create_all(engine)
