from __future__ import annotations

import logging
from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import func, insert, select, update
from sqlalchemy.exc import IntegrityError

from auth_core.application.ports.user_repository_port import (
    UserEmailConflictError,
    UserRepositoryPort,
)
from auth_core.domain.entities.user import USER_ROLES, NewUser, User
from auth_core.infrastructure.db.mappers.user_mapper import map_row_to_user
from auth_core.infrastructure.db.models.users import UserModel


logger = logging.getLogger(__name__)

users = UserModel.__table__


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SqlUserRepository(UserRepositoryPort):
    def __init__(self, engine):
        self._engine = engine

    def get_user_by_email(self, *, email: str) -> User | None:
        stmt = select(users).where(func.lower(users.c.email) == email.lower()).limit(1)
        with self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        if row is None:
            return None
        return map_row_to_user(row)

    def get_user_by_id(self, *, user_id: str) -> User | None:
        stmt = select(users).where(users.c.id == user_id).limit(1)
        with self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        if row is None:
            return None
        return map_row_to_user(row)

    def create_user(self, *, new_user: NewUser) -> User:
        # O mapper recusa papeis desconhecidos; nao gravar linha que nao pode ser lida.
        if new_user.role not in USER_ROLES:
            raise ValueError(f"Unknown user role: {new_user.role!r}")

        now = utcnow()
        user_id = str(uuid4())
        params = {
            "id": user_id,
            "email": new_user.email,
            "username": new_user.username,
            "password_hash": new_user.password_hash,
            "first_name": new_user.first_name,
            "last_name": new_user.last_name,
            "role": new_user.role,
            "is_active": new_user.is_active,
            "email_verified": new_user.email_verified,
            "created_at": now,
            "updated_at": now,
            "last_login_at": None,
        }
        try:
            with self._engine.begin() as conn:
                conn.execute(insert(users).values(**params))
                row = conn.execute(select(users).where(users.c.id == user_id)).mappings().one()
        except IntegrityError as exc:
            raise UserEmailConflictError(new_user.email) from exc

        logger.info("user_repo: create_user id=%s", user_id)
        return map_row_to_user(row)

    def update_last_login(self, *, user_id: str) -> None:
        now = utcnow()
        stmt = (
            update(users)
            .where(users.c.id == user_id)
            .values(last_login_at=now, updated_at=now)
        )
        with self._engine.begin() as conn:
            conn.execute(stmt)
