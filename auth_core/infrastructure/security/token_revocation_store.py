from __future__ import annotations

import logging
from threading import Lock

import redis

from auth_core.application.ports.token_revocation_port import TokenRevocationPort


logger = logging.getLogger(__name__)


class RedisTokenRevocationStore(TokenRevocationPort):
    def __init__(self, client: redis.Redis, *, key_prefix: str = "app:"):
        self._client = client
        self._key_prefix = key_prefix

    @classmethod
    def from_settings(
        cls,
        *,
        host: str,
        port: int,
        password: str | None,
        db: int,
        key_prefix: str,
    ) -> RedisTokenRevocationStore:
        client = redis.Redis(host=host, port=port, password=password, db=db, decode_responses=True)
        return cls(client, key_prefix=key_prefix)

    def _key(self, user_id: str) -> str:
        return f"{self._key_prefix}revocation:{user_id}"

    def get_generation(self, *, user_id: str) -> int:
        value = self._client.get(self._key(user_id))
        return int(value) if value is not None else 0

    def bump_generation(self, *, user_id: str) -> int:
        generation = int(self._client.incr(self._key(user_id)))
        logger.info("revocation_store: bump_generation user_id=%s generation=%s", user_id, generation)
        return generation


class InMemoryTokenRevocationStore(TokenRevocationPort):
    # Processo unico apenas (dev/testes); em producao use RedisTokenRevocationStore.
    def __init__(self):
        self._generations: dict[str, int] = {}
        self._lock = Lock()

    def get_generation(self, *, user_id: str) -> int:
        with self._lock:
            return self._generations.get(user_id, 0)

    def bump_generation(self, *, user_id: str) -> int:
        with self._lock:
            generation = self._generations.get(user_id, 0) + 1
            self._generations[user_id] = generation
        logger.info("revocation_store: bump_generation user_id=%s generation=%s", user_id, generation)
        return generation
