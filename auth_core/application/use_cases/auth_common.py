from __future__ import annotations

from auth_core.application.dto.auth import AuthTokensOutput, AuthUserOutput, TokenPayload
from auth_core.application.ports.token_port import TokenPort
from auth_core.domain.entities.user import User


ACCESS_TOKEN_EXPIRES_IN = 3600


def normalize_email(email: str) -> str:
    return email.strip().lower()


def build_auth_user_output(user: User) -> AuthUserOutput:
    return AuthUserOutput(
        id=user.id,
        email=user.email,
        username=user.username,
        first_name=user.first_name,
        last_name=user.last_name,
        role=user.role,
        is_active=user.is_active,
        email_verified=user.email_verified,
        created_at=user.created_at,
        updated_at=user.updated_at,
        last_login_at=user.last_login_at,
    )


def issue_tokens(*, user: User, token_port: TokenPort) -> AuthTokensOutput:
    payload = TokenPayload(user_id=user.id, email=user.email, role=user.role)
    access_token = token_port.create_access_token(payload=payload)
    refresh_token = token_port.create_refresh_token(payload=payload)
    # expires_in e contrato do orquestrador, nao do emissor de tokens.
    return AuthTokensOutput(
        access_token=access_token,
        refresh_token=refresh_token,
        expires_in=ACCESS_TOKEN_EXPIRES_IN,
    )
