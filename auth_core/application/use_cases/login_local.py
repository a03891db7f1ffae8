from __future__ import annotations

import logging
from dataclasses import replace

from auth_core.application.dto.auth import AuthTokensOutput, LoginLocalInput
from auth_core.application.ports.password_hasher_port import PasswordHasherPort
from auth_core.application.ports.token_port import TokenPort
from auth_core.application.ports.user_repository_port import UserRepositoryPort
from auth_core.domain.exceptions import InvalidCredentialsError, UserInactiveError

from .auth_common import issue_tokens, normalize_email


logger = logging.getLogger(__name__)

LAST_LOGIN_UPDATE_FAILED = "last_login_update_failed"


class LoginLocalUseCase:
    def __init__(
        self,
        *,
        user_repository: UserRepositoryPort,
        password_hasher: PasswordHasherPort,
        token_port: TokenPort,
    ):
        self._user_repository = user_repository
        self._password_hasher = password_hasher
        self._token_port = token_port

    def execute(self, command: LoginLocalInput) -> AuthTokensOutput:
        email = normalize_email(command.email)
        user = self._user_repository.get_user_by_email(email=email)
        if user is None:
            raise InvalidCredentialsError("Invalid credentials.")

        if not user.password_hash:
            raise InvalidCredentialsError("Invalid credentials.")

        if not self._password_hasher.verify(command.password, user.password_hash):
            raise InvalidCredentialsError("Invalid credentials.")

        # Checado depois da senha para nao revelar a existencia da conta.
        if not user.is_active:
            raise UserInactiveError("Account is disabled.")

        tokens = issue_tokens(user=user, token_port=self._token_port)

        try:
            self._user_repository.update_last_login(user_id=user.id)
        except Exception:
            logger.warning("login_local: update_last_login failed user_id=%s", user.id, exc_info=True)
            return replace(tokens, warnings=tokens.warnings + (LAST_LOGIN_UPDATE_FAILED,))

        return tokens
