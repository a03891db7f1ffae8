from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal


UserRole = Literal["admin", "user", "moderator", "guest"]

USER_ROLES: tuple[UserRole, ...] = ("admin", "user", "moderator", "guest")
DEFAULT_USER_ROLE: UserRole = "user"


@dataclass(frozen=True)
class User:
    id: str
    email: str
    username: str
    password_hash: str | None
    first_name: str
    last_name: str
    role: UserRole
    is_active: bool
    email_verified: bool
    created_at: datetime
    updated_at: datetime
    last_login_at: datetime | None = None


@dataclass(frozen=True)
class NewUser:
    email: str
    username: str
    password_hash: str
    first_name: str
    last_name: str
    role: UserRole
    is_active: bool
    email_verified: bool
