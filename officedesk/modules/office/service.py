"""Office service: listing, lookup and default office provisioning."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from officedesk.models.office import Office
from officedesk.models.staff import Staff
from officedesk.modules.office.constants import DEFAULT_OFFICES

logger = logging.getLogger(__name__)


class OfficeService:
    def __init__(self, db: AsyncSession):
        self.db = db

    def _base_query(self):
        return select(Office).options(selectinload(Office.members).selectinload(Staff.offices))

    async def get_all_offices(self, is_external: bool | None = None) -> list[Office]:
        """List offices with their members, optionally filtered by the external flag."""
        query = self._base_query().order_by(Office.id)
        if is_external is not None:
            query = query.where(Office.is_external == is_external)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_office_by_name(self, name: str) -> Office | None:
        result = await self.db.execute(self._base_query().where(Office.name == name))
        return result.scalar_one_or_none()

    async def create_default_offices_if_not_exist(self) -> int:
        """Create any missing default office, keyed on (category, is_external).

        Returns the number of offices created.
        """
        created = 0
        for office_data in DEFAULT_OFFICES:
            is_external = office_data.get("is_external", False)
            result = await self.db.execute(
                select(Office.id).where(
                    Office.category == office_data["category"],
                    Office.is_external == is_external,
                )
            )
            if result.first() is not None:
                continue

            self.db.add(Office(**{**office_data, "is_external": is_external}))
            created += 1
            logger.info("Default office created: %s (%s)", office_data["name"], office_data["category"].value)

        if created:
            await self.db.flush()
        return created
