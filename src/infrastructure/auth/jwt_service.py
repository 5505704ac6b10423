from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping
from uuid import UUID

from jose import jwt
from jose.exceptions import JWTError

from src.application.errors import AuthError

TENANT_CLAIM = "tid"


@dataclass(slots=True, frozen=True)
class TokenIdentity:
    """Who the bearer is, and the farm the token was issued for (if pinned)."""

    user_id: UUID
    tenant_id: UUID | None
    claims: dict[str, Any]

    def allows_tenant(self, tenant_id: UUID) -> bool:
        return self.tenant_id is None or self.tenant_id == tenant_id


def _uuid_claim(claims: Mapping[str, Any], name: str) -> UUID | None:
    value = claims.get(name)
    if value is None:
        return None
    try:
        return UUID(str(value))
    except ValueError as exc:
        raise AuthError(f"Token claim '{name}' is not a valid UUID") from exc


class JWTService:
    """Signs and reads the HS256 access tokens sent to the flock API."""

    def __init__(
        self,
        *,
        secret_key: str,
        algorithm: str,
        access_token_expires_minutes: int,
        issuer: str | None = None,
        audience: str | None = None,
    ) -> None:
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.access_token_expires_minutes = access_token_expires_minutes
        self.issuer = issuer
        self.audience = audience

    def create_access_token(
        self,
        *,
        subject: UUID,
        tenant_id: UUID | None = None,
        extra_claims: Mapping[str, Any] | None = None,
    ) -> str:
        issued_at = datetime.now(timezone.utc)
        expires_at = issued_at + timedelta(minutes=self.access_token_expires_minutes)
        claims: dict[str, Any] = dict(extra_claims or {})
        claims.update(
            sub=str(subject),
            iat=int(issued_at.timestamp()),
            exp=int(expires_at.timestamp()),
            typ="access",
        )
        # A pinned token only opens the farm it was issued for
        if tenant_id is not None:
            claims[TENANT_CLAIM] = str(tenant_id)
        if self.issuer:
            claims["iss"] = self.issuer
        if self.audience:
            claims["aud"] = self.audience
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> dict[str, Any]:
        try:
            claims = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                audience=self.audience,
            )
        except JWTError as exc:
            raise AuthError("Token validation failed") from exc
        if claims.get("typ", "access") != "access":
            raise AuthError("Access token required")
        return claims

    def read_identity(self, token: str) -> TokenIdentity:
        claims = self.decode(token)
        user_id = _uuid_claim(claims, "sub")
        if user_id is None:
            raise AuthError("Token missing subject")
        return TokenIdentity(
            user_id=user_id, tenant_id=_uuid_claim(claims, TENANT_CLAIM), claims=claims
        )
