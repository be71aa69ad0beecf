"""Database seeder: default offices and a bootstrap admin account.

Run via: python -m officedesk.seed
"""

import asyncio
import logging

from officedesk.config import settings
from officedesk.database.engine import async_session, engine
from officedesk.exceptions import ConflictException
from officedesk.models.enums import StaffRole
from officedesk.modules.office.service import OfficeService
from officedesk.modules.staff.service import StaffService

logger = logging.getLogger(__name__)


async def seed() -> None:
    async with async_session() as session:
        created = await OfficeService(session).create_default_offices_if_not_exist()
        logger.info("Offices: %d created", created)

        try:
            await StaffService(session).create_staff(
                username=settings.bootstrap_admin_username,
                name="Organization",
                surname="Admin",
                password=settings.bootstrap_admin_password,
                role=StaffRole.ADMIN.name,
                office_names=["Municipal Organization Office"],
            )
        except ConflictException:
            logger.info("Admin %s already present", settings.bootstrap_admin_username)

        await session.commit()
    await engine.dispose()


def main() -> None:
    logging.basicConfig(level=settings.log_level.upper())
    asyncio.run(seed())


if __name__ == "__main__":
    main()
