from __future__ import annotations

import logging
from functools import lru_cache

from auth_core.application.ports.token_revocation_port import TokenRevocationPort
from auth_core.application.use_cases.login_local import LoginLocalUseCase
from auth_core.application.use_cases.logout_session import LogoutSessionUseCase
from auth_core.application.use_cases.refresh_session import RefreshSessionUseCase
from auth_core.application.use_cases.register_user import RegisterUserUseCase
from auth_core.infrastructure.db.engine import get_engine
from auth_core.infrastructure.db.repositories.user_repository import SqlUserRepository
from auth_core.infrastructure.security.password_hasher import PasswordHasher
from auth_core.infrastructure.security.token_revocation_store import (
    InMemoryTokenRevocationStore,
    RedisTokenRevocationStore,
)
from auth_core.infrastructure.security.token_service import JwtTokenService
from auth_core.shared.config import get_settings
from auth_core.shared.logging_config import configure_logging


logger = logging.getLogger(__name__)


class ConfigurationError(RuntimeError):
    """Configuracao obrigatoria ausente."""


def setup_logging() -> None:
    configure_logging(get_settings().log_level)


def _get_db_engine():
    settings = get_settings()
    return get_engine(
        settings.postgres_dsn,
        pool_size=settings.db_pool_size,
        connect_timeout_seconds=max(settings.db_timeout_ms // 1000, 1),
        ssl=settings.db_ssl,
    )


def _get_user_repository() -> SqlUserRepository:
    return SqlUserRepository(_get_db_engine())


@lru_cache(maxsize=1)
def _get_password_hasher() -> PasswordHasher:
    return PasswordHasher()


@lru_cache(maxsize=1)
def _get_revocation_store() -> TokenRevocationPort:
    settings = get_settings()
    if not settings.redis_host:
        logger.warning(
            "container: REDIS_HOST not set, using in-process token revocation store; "
            "logout only revokes tokens in this process"
        )
        return InMemoryTokenRevocationStore()
    return RedisTokenRevocationStore.from_settings(
        host=settings.redis_host,
        port=settings.redis_port,
        password=settings.redis_password,
        db=settings.redis_db,
        key_prefix=settings.redis_prefix,
    )


@lru_cache(maxsize=1)
def _get_token_service() -> JwtTokenService:
    settings = get_settings()
    if not settings.jwt_secret:
        raise ConfigurationError("JWT_SECRET is required.")
    return JwtTokenService(
        jwt_secret=settings.jwt_secret,
        access_ttl_seconds=settings.jwt_access_ttl_seconds,
        refresh_ttl_days=settings.jwt_refresh_ttl_days,
        revocation_store=_get_revocation_store(),
    )


def get_register_user_use_case() -> RegisterUserUseCase:
    return RegisterUserUseCase(
        user_repository=_get_user_repository(),
        password_hasher=_get_password_hasher(),
        enforce_credential_policy=get_settings().enforce_credential_policy,
    )


def get_login_local_use_case() -> LoginLocalUseCase:
    return LoginLocalUseCase(
        user_repository=_get_user_repository(),
        password_hasher=_get_password_hasher(),
        token_port=_get_token_service(),
    )


def get_refresh_session_use_case() -> RefreshSessionUseCase:
    return RefreshSessionUseCase(
        user_repository=_get_user_repository(),
        token_port=_get_token_service(),
    )


def get_logout_session_use_case() -> LogoutSessionUseCase:
    return LogoutSessionUseCase(token_port=_get_token_service())
