"""Staff module API router."""

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from officedesk.api.limiter import DEFAULT_LIMIT, limiter
from officedesk.database.session import get_db
from officedesk.models.enums import StaffRole
from officedesk.modules.auth.auth import AuthenticatedPrincipal
from officedesk.modules.auth.dependencies import is_authenticated
from officedesk.modules.staff.schemas import StaffResponse, UpdateStaffOfficesRequest
from officedesk.modules.staff.service import StaffService
from officedesk.utils import validate_office_category

router = APIRouter(prefix="/staff", tags=["staff"])


@router.get("/", response_model=list[StaffResponse], response_model_exclude_none=True)
@limiter.limit(DEFAULT_LIMIT)
async def get_all_staff(
    request: Request,
    is_external: bool | None = Query(None, alias="isExternal"),
    category: str | None = Query(None),
    principal: AuthenticatedPrincipal = Depends(is_authenticated({StaffRole.ADMIN, StaffRole.TOSM})),
    db: AsyncSession = Depends(get_db),
):
    """List staff members.

    Admins see everyone and may filter by ``isExternal`` and ``category``.
    Technical office staff only see external maintainers.
    """
    office_category = validate_office_category(category) if category else None
    if principal.role is StaffRole.TOSM:
        is_external = True

    svc = StaffService(db)
    staff = await svc.get_all_staff(is_external, office_category)
    return [StaffResponse.from_model(member) for member in staff]


@router.get(
    "/external",
    response_model=list[StaffResponse],
    response_model_exclude_none=True,
    dependencies=[Depends(is_authenticated({StaffRole.TOSM}))],
)
@limiter.limit(DEFAULT_LIMIT)
async def get_all_em_staff(
    request: Request,
    category: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """List members of external maintenance companies."""
    office_category = validate_office_category(category) if category else None
    svc = StaffService(db)
    staff = await svc.get_all_staff(True, office_category)
    return [StaffResponse.from_model(member) for member in staff]


@router.get(
    "/tosm",
    response_model=list[StaffResponse],
    response_model_exclude_none=True,
    dependencies=[Depends(is_authenticated({StaffRole.ADMIN}))],
)
@limiter.limit(DEFAULT_LIMIT)
async def get_all_tosm(
    request: Request,
    category: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    office_category = validate_office_category(category) if category else None
    svc = StaffService(db)
    staff = await svc.get_all_tosm(office_category)
    return [StaffResponse.from_model(member) for member in staff]


@router.patch(
    "/{username}/offices",
    response_model=StaffResponse,
    response_model_exclude_none=True,
    dependencies=[Depends(is_authenticated({StaffRole.ADMIN}))],
)
@limiter.limit(DEFAULT_LIMIT)
async def update_staff_offices(
    request: Request,
    username: str,
    body: UpdateStaffOfficesRequest,
    db: AsyncSession = Depends(get_db),
):
    """Replace, add to, or remove from a staff member's offices."""
    svc = StaffService(db)
    if body.offices is not None:
        staff = await svc.update_staff_offices(username, body.offices)
    elif body.add is not None:
        staff = await svc.add_office_to_staff(username, body.add)
    else:
        staff = await svc.remove_office_from_staff(username, body.remove)
    return StaffResponse.from_model(staff)
