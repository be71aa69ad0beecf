"""Auth module API router: staff login, current principal and staff registration."""

import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from officedesk.api.limiter import DEFAULT_LIMIT, limiter
from officedesk.database.session import get_db
from officedesk.exceptions import UnauthorizedException
from officedesk.models.enums import PrincipalType, StaffRole
from officedesk.modules.auth.auth import AuthenticatedPrincipal, create_access_token
from officedesk.modules.auth.constants import MSG_INVALID_CREDENTIALS
from officedesk.modules.auth.dependencies import is_authenticated
from officedesk.modules.auth.schemas import (
    LoginRequest,
    PrincipalResponse,
    RegisterMunicipalityRequest,
    TokenResponse,
)
from officedesk.modules.staff.schemas import StaffResponse
from officedesk.modules.staff.service import StaffService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
@limiter.limit(DEFAULT_LIMIT)
async def login(request: Request, body: LoginRequest, db: AsyncSession = Depends(get_db)):
    """Exchange staff credentials for a bearer token.

    Only staff sign in here. Citizen tokens are issued by the citizen-facing
    service with the same signing key and carry no role claim.
    """
    svc = StaffService(db)
    staff = await svc.authenticate_staff(body.username, body.password)
    if staff is None:
        logger.warning("Failed login attempt for %s", body.username)
        raise UnauthorizedException(MSG_INVALID_CREDENTIALS)

    principal = AuthenticatedPrincipal(username=staff.username, type=PrincipalType.STAFF, role=staff.role)
    return TokenResponse(
        access_token=create_access_token(principal),
        username=principal.username,
        type=principal.type,
        role=principal.role,
    )


@router.get("/me", response_model=PrincipalResponse)
@limiter.limit(DEFAULT_LIMIT)
async def me(request: Request, principal: AuthenticatedPrincipal = Depends(is_authenticated())):
    return PrincipalResponse(username=principal.username, type=principal.type, role=principal.role)


@router.post(
    "/register-municipality",
    response_model=StaffResponse,
    response_model_exclude_none=True,
    status_code=201,
    dependencies=[Depends(is_authenticated({StaffRole.ADMIN}))],
)
@limiter.limit(DEFAULT_LIMIT)
async def register_municipality_user(
    request: Request,
    body: RegisterMunicipalityRequest,
    db: AsyncSession = Depends(get_db),
):
    """Create a municipality staff account. The password is never echoed back."""
    svc = StaffService(db)
    staff = await svc.create_staff(
        username=body.username,
        name=body.name,
        surname=body.surname,
        password=body.password,
        role=body.role,
        office_names=body.office_names,
    )
    return StaffResponse.from_model(staff)
