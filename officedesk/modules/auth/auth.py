"""JWT principal resolution for FastAPI.

Validates Bearer tokens from the Authorization header, extracts the caller's
identity and stores it on ``request.state.principal`` for downstream handlers.
"""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from officedesk.config import settings
from officedesk.exceptions import UnauthorizedException
from officedesk.models.enums import PrincipalType, StaffRole
from officedesk.modules.auth.constants import (
    CLAIM_PRINCIPAL_TYPE,
    CLAIM_ROLE,
    CLAIM_SUBJECT,
    MSG_INVALID_TOKEN,
    MSG_MISSING_CLAIMS,
    MSG_NOT_AUTHENTICATED,
)

logger = logging.getLogger(__name__)

# FastAPI security scheme: extracts Bearer token from Authorization header
_bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class AuthenticatedPrincipal:
    """The caller identity resolved from a request's credentials."""

    username: str
    type: PrincipalType
    role: StaffRole | None = None


def create_access_token(principal: AuthenticatedPrincipal) -> str:
    """Sign a JWT carrying the principal's username, type and role."""
    now = datetime.now(UTC)
    payload = {
        CLAIM_SUBJECT: principal.username,
        CLAIM_PRINCIPAL_TYPE: principal.type.value,
        "iat": now,
        "exp": now + timedelta(minutes=settings.jwt_expiry_minutes),
    }
    if principal.role is not None:
        payload[CLAIM_ROLE] = principal.role.value
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def _decode_token(token: str) -> dict:
    """Decode and validate a JWT token. Raises UnauthorizedException on failure."""
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError as exc:
        logger.warning("JWT validation failed: %s", exc)
        raise UnauthorizedException(MSG_INVALID_TOKEN) from exc


def resolve_principal(token: str) -> AuthenticatedPrincipal:
    """Turn a bearer token into an AuthenticatedPrincipal.

    Staff tokens must carry a valid ``role`` claim; citizen tokens never do.
    """
    payload = _decode_token(token)
    try:
        principal_type = PrincipalType(payload[CLAIM_PRINCIPAL_TYPE])
        role = None
        if principal_type is PrincipalType.STAFF:
            role = StaffRole(payload[CLAIM_ROLE])
        return AuthenticatedPrincipal(
            username=payload[CLAIM_SUBJECT],
            type=principal_type,
            role=role,
        )
    except (KeyError, ValueError) as exc:
        raise UnauthorizedException(MSG_MISSING_CLAIMS) from exc


async def get_current_principal(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
) -> AuthenticatedPrincipal:
    """FastAPI dependency that resolves the caller or raises 401.

    FastAPI caches dependency results per request, so every consumer in a
    single request sees the same principal.
    """
    if credentials is None:
        raise UnauthorizedException(MSG_NOT_AUTHENTICATED)

    principal = resolve_principal(credentials.credentials)
    request.state.principal = principal
    return principal

