"""Auth module: principal resolution and role-based route gates."""

from officedesk.modules.auth.auth import (
    AuthenticatedPrincipal,
    create_access_token,
    get_current_principal,
    resolve_principal,
)
from officedesk.modules.auth.dependencies import AllowedRole, is_authenticated, is_role_allowed

__all__ = [
    # Principal
    "AuthenticatedPrincipal",
    "create_access_token",
    "resolve_principal",
    "get_current_principal",
    # Gate
    "AllowedRole",
    "is_authenticated",
    "is_role_allowed",
]
