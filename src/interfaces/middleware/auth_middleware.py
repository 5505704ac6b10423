from __future__ import annotations

from typing import Iterable
from uuid import UUID

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from src.application.errors import AuthError, PermissionDenied
from src.config.settings import Settings
from src.infrastructure.auth.context import (
    AuthContext,
    fetch_memberships,
    select_active_role,
)
from src.infrastructure.auth.jwt_service import JWTService

PUBLIC_PATHS: Iterable[str] = (
    "/api/v1/health",
    "/docs",
    "/openapi.json",
    "/redoc",
)


def bearer_token(request: Request) -> str:
    authorization = request.headers.get("Authorization")
    if not authorization:
        raise AuthError("Missing Authorization header")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthError("Invalid Authorization header")
    return token.strip()


def requested_tenant(request: Request, header: str) -> UUID:
    value = request.headers.get(header)
    if not value:
        raise PermissionDenied("Missing tenant header")
    try:
        return UUID(value)
    except ValueError as exc:
        raise PermissionDenied("Invalid tenant identifier") from exc


class AuthMiddleware(BaseHTTPMiddleware):
    """Resolves the caller's role on the farm named by the tenant header.

    Every request below ``/api/v1`` (except health and docs) must carry a
    bearer token and the tenant header. The token's user must hold a
    membership in that tenant, and a token pinned to a tenant cannot be
    replayed against another one.
    """

    def __init__(self, app, *, settings: Settings) -> None:
        super().__init__(app)
        self.settings = settings

    async def _authenticate(self, request: Request) -> AuthContext:
        token = bearer_token(request)
        tenant_id = requested_tenant(request, self.settings.tenant_header)
        jwt_service: JWTService | None = getattr(request.app.state, "jwt_service", None)
        session_factory = getattr(request.app.state, "session_factory", None)
        if jwt_service is None or session_factory is None:
            raise RuntimeError("Auth dependencies not configured on app.state")

        identity = jwt_service.read_identity(token)
        if not identity.allows_tenant(tenant_id):
            raise PermissionDenied("Token not valid for this tenant")
        async with session_factory() as session:
            memberships = await fetch_memberships(session, identity.user_id)
        return AuthContext(
            user_id=identity.user_id,
            tenant_id=tenant_id,
            role=select_active_role(memberships, tenant_id),
            claims=identity.claims,
        )

    async def dispatch(self, request: Request, call_next) -> Response:
        # Let CORS preflight pass without auth checks
        if request.method == "OPTIONS":
            return await call_next(request)
        if any(request.url.path.startswith(path) for path in PUBLIC_PATHS):
            return await call_next(request)

        try:
            request.state.auth_context = await self._authenticate(request)
        except (AuthError, PermissionDenied) as exc:
            return JSONResponse(status_code=exc.status_code, content=exc.to_payload())
        return await call_next(request)
