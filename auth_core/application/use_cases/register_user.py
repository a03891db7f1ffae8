from __future__ import annotations

from auth_core.application.dto.auth import RegisterUserInput, RegisterUserOutput
from auth_core.application.ports.password_hasher_port import PasswordHasherPort
from auth_core.application.ports.user_repository_port import (
    UserEmailConflictError,
    UserRepositoryPort,
)
from auth_core.domain.entities.user import DEFAULT_USER_ROLE, USER_ROLES, NewUser
from auth_core.domain.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidRoleError,
    WeakPasswordError,
)
from auth_core.domain.services.credential_policy import validate_email, validate_password

from .auth_common import build_auth_user_output, normalize_email


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        user_repository: UserRepositoryPort,
        password_hasher: PasswordHasherPort,
        enforce_credential_policy: bool = False,
    ):
        self._user_repository = user_repository
        self._password_hasher = password_hasher
        self._enforce_credential_policy = enforce_credential_policy

    def execute(self, command: RegisterUserInput) -> RegisterUserOutput:
        role = command.role or DEFAULT_USER_ROLE
        if role not in USER_ROLES:
            raise InvalidRoleError(f"Unknown user role: {role!r}.")

        if self._enforce_credential_policy:
            self._check_credential_policy(command)

        email = normalize_email(command.email)

        # Saida rapida; a constraint unica do armazenamento e a autoridade.
        if self._user_repository.get_user_by_email(email=email) is not None:
            raise EmailAlreadyExistsError("User with this email already exists.")

        password_hash = self._password_hasher.hash(command.password)

        try:
            user = self._user_repository.create_user(
                new_user=NewUser(
                    email=email,
                    username=command.username,
                    password_hash=password_hash,
                    first_name=command.first_name,
                    last_name=command.last_name,
                    role=role,
                    is_active=True,
                    email_verified=False,
                )
            )
        except UserEmailConflictError as exc:
            raise EmailAlreadyExistsError("User with this email already exists.") from exc

        return RegisterUserOutput(user=build_auth_user_output(user))

    @staticmethod
    def _check_credential_policy(command: RegisterUserInput) -> None:
        if not validate_email(command.email):
            raise InvalidEmailError("Invalid email format.")
        result = validate_password(command.password)
        if not result.valid:
            raise WeakPasswordError(result.errors)
