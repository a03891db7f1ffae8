from __future__ import annotations

from typing import Any, Mapping

from auth_core.domain.entities.user import USER_ROLES, User


def _as_str(value: Any) -> str:
    return str(value)


def map_row_to_user(row: Mapping[str, Any]) -> User:
    role = row["role"]
    if role not in USER_ROLES:
        raise ValueError(f"Unknown user role: {role!r}")
    return User(
        id=_as_str(row["id"]),
        email=row["email"],
        username=row["username"],
        password_hash=row.get("password_hash"),
        first_name=row["first_name"],
        last_name=row["last_name"],
        role=role,
        is_active=bool(row["is_active"]),
        email_verified=bool(row["email_verified"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        last_login_at=row.get("last_login_at"),
    )
