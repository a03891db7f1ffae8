from __future__ import annotations

from typing import Protocol


class TokenRevocationPort(Protocol):
    def get_generation(self, *, user_id: str) -> int:
        ...

    def bump_generation(self, *, user_id: str) -> int:
        ...
