"""Staff service: listing, creation, authentication and office membership."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from officedesk.exceptions import BadRequestException, ConflictException, NotFoundException
from officedesk.models.enums import OfficeCategory, StaffRole
from officedesk.models.office import Office
from officedesk.models.staff import Staff
from officedesk.modules.auth.security import hash_password, verify_password
from officedesk.utils import find_or_throw_not_found

logger = logging.getLogger(__name__)


class StaffService:
    def __init__(self, db: AsyncSession):
        self.db = db

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _base_query(self):
        return select(Staff).options(selectinload(Staff.offices))

    async def get_all_staff(
        self,
        is_external: bool | None = None,
        category: OfficeCategory | None = None,
    ) -> list[Staff]:
        """List staff, optionally restricted to members of matching offices."""
        query = self._base_query()
        if is_external is not None or category is not None:
            query = query.join(Staff.offices)
            if is_external is not None:
                query = query.where(Office.is_external == is_external)
            if category is not None:
                query = query.where(Office.category == category)
            query = query.distinct()
        result = await self.db.execute(query.order_by(Staff.id))
        return list(result.scalars().unique().all())

    async def get_all_tosm(self, category: OfficeCategory | None = None) -> list[Staff]:
        """List technical office staff members, optionally by office category."""
        query = self._base_query().where(Staff.role == StaffRole.TOSM)
        if category is not None:
            query = query.join(Staff.offices).where(Office.category == category).distinct()
        result = await self.db.execute(query.order_by(Staff.id))
        return list(result.scalars().unique().all())

    async def get_staff_by_username(self, username: str) -> Staff | None:
        result = await self.db.execute(self._base_query().where(Staff.username == username))
        return result.scalar_one_or_none()

    async def _get_staff_or_404(self, username: str) -> Staff:
        staff = await self.get_staff_by_username(username)
        if staff is None:
            raise NotFoundException(f"Staff with username {username} not found")
        return staff

    async def _get_offices(self, office_names: list[str]) -> list[Office]:
        """Resolve office names, raising NotFoundException for the first unknown one."""
        if not office_names:
            return []
        result = await self.db.execute(select(Office).where(Office.name.in_(office_names)))
        offices = list(result.scalars().all())
        return [
            find_or_throw_not_found(offices, lambda o, n=name: o.name == n, f"Office {name} not found")
            for name in dict.fromkeys(office_names)
        ]

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    async def authenticate_staff(self, username: str, password: str) -> Staff | None:
        staff = await self.get_staff_by_username(username)
        if staff is None or not verify_password(password, staff.password_hash):
            return None
        return staff

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def create_staff(
        self,
        username: str,
        name: str,
        surname: str,
        password: str,
        role: str,
        office_names: list[str] | None = None,
    ) -> Staff:
        """Create a municipality user. ``role`` is the StaffRole member name."""
        if role not in StaffRole.__members__:
            raise BadRequestException(f"Invalid staff role: {role}")

        if await self.get_staff_by_username(username) is not None:
            raise ConflictException(f"Staff with username {username} already exists")

        offices = await self._get_offices(office_names or [])
        staff = Staff(
            username=username,
            name=name,
            surname=surname,
            password_hash=hash_password(password),
            role=StaffRole[role],
            offices=offices,
        )
        self.db.add(staff)
        await self.db.flush()
        logger.info("Staff %s created with role %s", username, staff.role.value)
        return staff

    async def update_staff_offices(self, username: str, office_names: list[str]) -> Staff:
        """Replace the staff member's offices."""
        staff = await self._get_staff_or_404(username)
        staff.offices = await self._get_offices(office_names)
        await self.db.flush()
        return staff

    async def add_office_to_staff(self, username: str, office_name: str) -> Staff:
        staff = await self._get_staff_or_404(username)
        if any(office.name == office_name for office in staff.offices):
            raise ConflictException(f"Staff {username} already belongs to office {office_name}")
        staff.offices.extend(await self._get_offices([office_name]))
        await self.db.flush()
        return staff

    async def remove_office_from_staff(self, username: str, office_name: str) -> Staff:
        staff = await self._get_staff_or_404(username)
        office = find_or_throw_not_found(
            staff.offices,
            lambda o: o.name == office_name,
            f"Staff {username} does not belong to office {office_name}",
        )
        staff.offices.remove(office)
        await self.db.flush()
        return staff
