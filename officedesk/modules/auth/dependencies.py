"""Role-based authorization gate for route registration.

Usage::

    @router.get("/", dependencies=[Depends(is_authenticated({StaffRole.ADMIN}))])
    async def get_all_offices(...):
        ...

The gate resolves the caller first (401 when that fails) and only then checks
the role set (403 when the caller is not in it). Role membership is exact:
a role that is not listed is rejected whatever its rank.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable

from fastapi import Depends

from officedesk.exceptions import ForbiddenException
from officedesk.models.enums import PrincipalType, StaffRole
from officedesk.modules.auth.auth import AuthenticatedPrincipal, get_current_principal
from officedesk.modules.auth.constants import MSG_INSUFFICIENT_PERMISSIONS

logger = logging.getLogger(__name__)

AllowedRole = PrincipalType | StaffRole


def is_role_allowed(principal: AuthenticatedPrincipal, allowed_roles: frozenset[AllowedRole]) -> bool:
    """Return True if the principal may pass a gate configured with ``allowed_roles``.

    Citizens pass only when ``CITIZEN`` is listed. Staff pass when ``STAFF`` is
    listed or when their own role is.
    """
    if principal.type is PrincipalType.CITIZEN:
        return PrincipalType.CITIZEN in allowed_roles
    if principal.type is PrincipalType.STAFF:
        if PrincipalType.STAFF in allowed_roles:
            return True
        return principal.role is not None and principal.role in allowed_roles
    return False


def is_authenticated(
    allowed_roles: Iterable[AllowedRole] | None = None,
) -> Callable[..., Awaitable[AuthenticatedPrincipal]]:
    """Factory that returns a FastAPI dependency enforcing ``allowed_roles``.

    ``None`` admits any authenticated principal. An empty collection is
    rejected here, at route registration, since it would deny every caller.
    """
    roles: frozenset[AllowedRole] | None = None
    if allowed_roles is not None:
        roles = frozenset(allowed_roles)
        if not roles:
            raise ValueError("allowed_roles must not be empty; pass None to admit any authenticated caller")
        unknown = [r for r in roles if not isinstance(r, (PrincipalType, StaffRole))]
        if unknown:
            raise ValueError(f"Unknown roles in gate configuration: {unknown}")

    async def _check(
        principal: AuthenticatedPrincipal = Depends(get_current_principal),
    ) -> AuthenticatedPrincipal:
        if roles is None:
            return principal
        if not is_role_allowed(principal, roles):
            logger.warning(
                "Access denied for %s (type=%s, role=%s)",
                principal.username,
                principal.type.value,
                principal.role.value if principal.role else None,
            )
            raise ForbiddenException(MSG_INSUFFICIENT_PERMISSIONS)
        return principal

    _check.allowed_roles = roles  # type: ignore[attr-defined]
    return _check
