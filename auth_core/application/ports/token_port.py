from __future__ import annotations

from typing import Protocol

from auth_core.application.dto.auth import TokenPayload


class TokenPort(Protocol):
    def create_access_token(self, *, payload: TokenPayload) -> str:
        ...

    def create_refresh_token(self, *, payload: TokenPayload) -> str:
        ...

    def verify_refresh_token(self, *, token: str) -> TokenPayload:
        ...

    def revoke_user_tokens(self, *, user_id: str) -> None:
        ...
