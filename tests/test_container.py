from __future__ import annotations

import logging

import pytest

from auth_core import container
from auth_core.application.use_cases.logout_session import LogoutSessionUseCase
from auth_core.infrastructure.security.token_revocation_store import (
    InMemoryTokenRevocationStore,
    RedisTokenRevocationStore,
)


@pytest.fixture(autouse=True)
def reset_container_caches(monkeypatch):
    for name in ("JWT_SECRET", "REDIS_HOST", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    container._get_token_service.cache_clear()
    container._get_revocation_store.cache_clear()
    yield monkeypatch
    container._get_token_service.cache_clear()
    container._get_revocation_store.cache_clear()


def test_token_service_requires_jwt_secret():
    with pytest.raises(container.ConfigurationError, match="JWT_SECRET"):
        container.get_logout_session_use_case()


def test_logout_use_case_uses_in_memory_store_without_redis(reset_container_caches):
    reset_container_caches.setenv("JWT_SECRET", "test-secret-with-at-least-32-bytes-of-entropy")

    use_case = container.get_logout_session_use_case()

    assert isinstance(use_case, LogoutSessionUseCase)
    assert isinstance(container._get_revocation_store(), InMemoryTokenRevocationStore)


def test_revocation_store_uses_redis_when_host_configured(reset_container_caches):
    reset_container_caches.setenv("REDIS_HOST", "redis.local")

    assert isinstance(container._get_revocation_store(), RedisTokenRevocationStore)


def test_setup_logging_applies_level(reset_container_caches):
    reset_container_caches.setenv("LOG_LEVEL", "WARNING")
    root = logging.getLogger()
    previous_level = root.level
    previous_handlers = list(root.handlers)
    root.handlers = []
    try:
        container.setup_logging()
        assert root.level == logging.WARNING
    finally:
        root.handlers = previous_handlers
        root.setLevel(previous_level)


def test_in_memory_revocation_fallback_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="auth_core.container"):
        store = container._get_revocation_store()

    assert isinstance(store, InMemoryTokenRevocationStore)
    assert any("REDIS_HOST not set" in record.getMessage() for record in caplog.records)
