"""Office module API router."""

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from officedesk.api.limiter import DEFAULT_LIMIT, limiter
from officedesk.database.session import get_db
from officedesk.models.enums import StaffRole
from officedesk.modules.auth.dependencies import is_authenticated
from officedesk.modules.office.schemas import OfficeResponse
from officedesk.modules.office.service import OfficeService

router = APIRouter(prefix="/offices", tags=["offices"])


@router.get(
    "/",
    response_model=list[OfficeResponse],
    response_model_exclude_none=True,
    dependencies=[Depends(is_authenticated({StaffRole.ADMIN}))],
)
@limiter.limit(DEFAULT_LIMIT)
async def get_all_offices(
    request: Request,
    is_external: bool | None = Query(None, alias="isExternal"),
    db: AsyncSession = Depends(get_db),
):
    """List every office with its members. Organization office admins only."""
    svc = OfficeService(db)
    offices = await svc.get_all_offices(is_external)
    return [OfficeResponse.from_model(office) for office in offices]
