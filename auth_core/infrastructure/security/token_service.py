from __future__ import annotations

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt

from auth_core.application.dto.auth import TokenPayload
from auth_core.application.ports.token_port import TokenPort
from auth_core.application.ports.token_revocation_port import TokenRevocationPort
from auth_core.domain.entities.user import USER_ROLES
from auth_core.domain.exceptions import InvalidTokenError


ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


class JwtTokenService(TokenPort):
    def __init__(
        self,
        *,
        jwt_secret: str,
        access_ttl_seconds: int,
        refresh_ttl_days: int,
        revocation_store: TokenRevocationPort,
        algorithm: str = "HS256",
    ):
        self._jwt_secret = jwt_secret
        self._access_ttl_seconds = access_ttl_seconds
        self._refresh_ttl_days = refresh_ttl_days
        self._revocation_store = revocation_store
        self._algorithm = algorithm

    def create_access_token(self, *, payload: TokenPayload) -> str:
        claims = self._base_claims(
            payload=payload,
            token_type=ACCESS_TOKEN_TYPE,
            ttl=timedelta(seconds=self._access_ttl_seconds),
        )
        return jwt.encode(claims, self._jwt_secret, algorithm=self._algorithm)

    def create_refresh_token(self, *, payload: TokenPayload) -> str:
        claims = self._base_claims(
            payload=payload,
            token_type=REFRESH_TOKEN_TYPE,
            ttl=timedelta(days=self._refresh_ttl_days),
        )
        claims["gen"] = self._revocation_store.get_generation(user_id=payload.user_id)
        return jwt.encode(claims, self._jwt_secret, algorithm=self._algorithm)

    def verify_refresh_token(self, *, token: str) -> TokenPayload:
        claims = self._decode(token=token, token_type=REFRESH_TOKEN_TYPE)
        payload = self._payload_from_claims(claims)

        generation = claims.get("gen")
        if not isinstance(generation, int):
            raise InvalidTokenError("Invalid refresh token.")
        if generation < self._revocation_store.get_generation(user_id=payload.user_id):
            raise InvalidTokenError("Refresh token revoked.")

        return payload

    def revoke_user_tokens(self, *, user_id: str) -> None:
        self._revocation_store.bump_generation(user_id=user_id)

    def decode_access_token(self, *, token: str) -> TokenPayload:
        claims = self._decode(token=token, token_type=ACCESS_TOKEN_TYPE)
        return self._payload_from_claims(claims)

    def _base_claims(self, *, payload: TokenPayload, token_type: str, ttl: timedelta) -> dict:
        now = utcnow()
        return {
            "sub": payload.user_id,
            "email": payload.email,
            "role": payload.role,
            "type": token_type,
            "jti": uuid4().hex,
            "iat": int(now.timestamp()),
            "exp": int((now + ttl).timestamp()),
        }

    def _decode(self, *, token: str, token_type: str) -> dict:
        try:
            claims = jwt.decode(token, self._jwt_secret, algorithms=[self._algorithm])
        except jwt.PyJWTError as exc:
            raise InvalidTokenError("Invalid token.") from exc

        if claims.get("type") != token_type:
            raise InvalidTokenError("Invalid token type.")
        return claims

    @staticmethod
    def _payload_from_claims(claims: dict) -> TokenPayload:
        user_id = claims.get("sub")
        if not user_id or not isinstance(user_id, str):
            raise InvalidTokenError("Invalid token subject.")
        role = claims.get("role")
        if role not in USER_ROLES:
            raise InvalidTokenError("Invalid token role.")
        return TokenPayload(user_id=user_id, email=str(claims.get("email", "")), role=role)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
