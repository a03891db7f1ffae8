from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from auth_core.domain.entities.user import UserRole


@dataclass(frozen=True)
class AuthUserOutput:
    id: str
    email: str
    username: str
    first_name: str
    last_name: str
    role: UserRole
    is_active: bool
    email_verified: bool
    created_at: datetime
    updated_at: datetime
    last_login_at: datetime | None


@dataclass(frozen=True)
class RegisterUserInput:
    email: str
    username: str
    password: str
    first_name: str
    last_name: str
    role: UserRole | None = None


@dataclass(frozen=True)
class RegisterUserOutput:
    user: AuthUserOutput


@dataclass(frozen=True)
class LoginLocalInput:
    email: str
    password: str


@dataclass(frozen=True)
class RefreshSessionInput:
    refresh_token: str


@dataclass(frozen=True)
class LogoutInput:
    user_id: str


@dataclass(frozen=True)
class AuthTokensOutput:
    access_token: str
    refresh_token: str
    expires_in: int
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class TokenPayload:
    user_id: str
    email: str
    role: UserRole
