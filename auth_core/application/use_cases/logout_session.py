from __future__ import annotations

from auth_core.application.dto.auth import LogoutInput
from auth_core.application.ports.token_port import TokenPort


class LogoutSessionUseCase:
    def __init__(self, *, token_port: TokenPort):
        self._token_port = token_port

    def execute(self, command: LogoutInput) -> None:
        # Access tokens ja emitidos continuam validos ate expirar.
        self._token_port.revoke_user_tokens(user_id=command.user_id)
