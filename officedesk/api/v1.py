"""Centralized v1 API router: all module routers are included here."""

from fastapi import APIRouter

from officedesk.config import settings
from officedesk.modules.auth.router import router as auth_router
from officedesk.modules.office.router import router as office_router
from officedesk.modules.staff.router import router as staff_router

v1_router = APIRouter(prefix=settings.api_prefix)
v1_router.include_router(auth_router)
v1_router.include_router(office_router)
v1_router.include_router(staff_router)
