"""
Caller identity and role gates for FastAPI routes.

- Extracts the Bearer JWT from the Authorization header
- Decodes it with the configured secret / issuer / audience (HS256)
- Builds a CurrentUser from the ``uuid`` (or ``sub``) and ``roles``/``role`` claims
- ``require_roles`` turns a role list into a route dependency

Token issuance lives elsewhere; this module only consumes tokens.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

import jwt
from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from mockcommerce.infrastructure.api.responses import ApiError
from mockcommerce.infrastructure.config import Settings

ADMIN = "Admin"
SELLER = "Seller"
CUSTOMER = "Customer"


@dataclass(frozen=True)
class CurrentUser:
    user_id: UUID
    roles: frozenset

    def has_any_role(self, *roles: str) -> bool:
        return any(role in self.roles for role in roles)

    @property
    def is_admin(self) -> bool:
        return ADMIN in self.roles


security = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _roles_from_claims(claims: dict) -> frozenset:
    raw = claims.get("roles", claims.get("role", []))
    if isinstance(raw, str):
        raw = [raw]
    return frozenset(str(r) for r in raw)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    settings: Settings = Depends(get_settings),
) -> CurrentUser:
    """Decode the caller's token.

    Raises ApiError 401 if the token is missing, invalid, expired, or lacks
    a usable user id.
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise ApiError(status.HTTP_401_UNAUTHORIZED, "Authentication required", "UNAUTHORIZED")

    try:
        claims = jwt.decode(
            credentials.credentials,
            settings.jwt_secret_key,
            algorithms=["HS256"],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
            options={"require": ["exp", "iat", "aud", "iss"]},
        )
    except jwt.ExpiredSignatureError:
        raise ApiError(status.HTTP_401_UNAUTHORIZED, "Token has expired", "TOKEN_EXPIRED")
    except jwt.InvalidTokenError as e:
        raise ApiError(status.HTTP_401_UNAUTHORIZED, f"Invalid token: {e}", "INVALID_TOKEN")

    raw_id = claims.get("uuid") or claims.get("sub")
    try:
        user_id = UUID(str(raw_id))
    except ValueError:
        raise ApiError(
            status.HTTP_401_UNAUTHORIZED,
            "Missing required claims in token",
            "INVALID_TOKEN",
        )

    return CurrentUser(user_id=user_id, roles=_roles_from_claims(claims))


def require_roles(*roles: str):
    """Route dependency: the caller must hold at least one of *roles*."""

    def dependency(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        if not user.has_any_role(*roles):
            raise ApiError(
                status.HTTP_403_FORBIDDEN,
                f"Requires role: {' or '.join(roles)}",
                "FORBIDDEN",
            )
        return user

    return dependency


def ensure_owner(user: CurrentUser, settings: Settings, *owner_ids: Optional[UUID]) -> None:
    """Let the call through if the caller is one of *owner_ids* or an Admin."""
    if not settings.enforce_ownership or user.is_admin:
        return
    if user.user_id in owner_ids:
        return
    raise ApiError(
        status.HTTP_403_FORBIDDEN,
        "You are not allowed to access this resource",
        "FORBIDDEN",
    )
