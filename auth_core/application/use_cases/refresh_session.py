from __future__ import annotations

from auth_core.application.dto.auth import AuthTokensOutput, RefreshSessionInput
from auth_core.application.ports.token_port import TokenPort
from auth_core.application.ports.user_repository_port import UserRepositoryPort
from auth_core.domain.exceptions import InvalidTokenError

from .auth_common import issue_tokens


class RefreshSessionUseCase:
    def __init__(self, *, user_repository: UserRepositoryPort, token_port: TokenPort):
        self._user_repository = user_repository
        self._token_port = token_port

    def execute(self, command: RefreshSessionInput) -> AuthTokensOutput:
        token = command.refresh_token.strip()
        if not token:
            raise InvalidTokenError("Invalid refresh token.")

        payload = self._token_port.verify_refresh_token(token=token)

        user = self._user_repository.get_user_by_id(user_id=payload.user_id)
        if user is None or not user.is_active:
            raise InvalidTokenError("Invalid refresh token.")

        # O novo par reflete o estado atual do usuario, nao os claims antigos.
        return issue_tokens(user=user, token_port=self._token_port)
