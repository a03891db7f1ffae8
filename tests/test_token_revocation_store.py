from __future__ import annotations

from auth_core.infrastructure.security.token_revocation_store import (
    InMemoryTokenRevocationStore,
    RedisTokenRevocationStore,
)


class FakeRedis:
    def __init__(self):
        self.values: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def incr(self, key: str) -> int:
        value = int(self.values.get(key, "0")) + 1
        self.values[key] = str(value)
        return value


def test_redis_store_uses_prefixed_keys_and_increments():
    client = FakeRedis()
    store = RedisTokenRevocationStore(client, key_prefix="app:")

    assert store.get_generation(user_id="user-1") == 0
    assert store.bump_generation(user_id="user-1") == 1
    assert store.bump_generation(user_id="user-1") == 2

    assert client.values == {"app:revocation:user-1": "2"}
    assert store.get_generation(user_id="user-1") == 2
    assert store.get_generation(user_id="user-2") == 0


def test_redis_store_from_settings_builds_client():
    store = RedisTokenRevocationStore.from_settings(
        host="redis.local",
        port=6380,
        password=None,
        db=2,
        key_prefix="auth:",
    )

    kwargs = store._client.connection_pool.connection_kwargs
    assert kwargs["host"] == "redis.local"
    assert kwargs["port"] == 6380
    assert kwargs["db"] == 2


def test_in_memory_store_tracks_generation_per_user():
    store = InMemoryTokenRevocationStore()

    store.bump_generation(user_id="user-1")

    assert store.get_generation(user_id="user-1") == 1
    assert store.get_generation(user_id="user-2") == 0
