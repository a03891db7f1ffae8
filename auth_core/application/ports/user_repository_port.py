from __future__ import annotations

from typing import Protocol

from auth_core.domain.entities.user import NewUser, User


class UserEmailConflictError(Exception):
    """Violacao da unicidade de email no armazenamento."""


class UserRepositoryPort(Protocol):
    def get_user_by_email(self, *, email: str) -> User | None:
        ...

    def get_user_by_id(self, *, user_id: str) -> User | None:
        ...

    def create_user(self, *, new_user: NewUser) -> User:
        ...

    def update_last_login(self, *, user_id: str) -> None:
        ...
