import logging
from collections.abc import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from officedesk.database.engine import async_session

logger = logging.getLogger(__name__)


async def get_db() -> AsyncIterator[AsyncSession]:
    """Yield one unit of work per request.

    The session commits when the handler returns and rolls back if it raises,
    including for AppException subclasses rendered as 4xx responses.
    """
    async with async_session() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            logger.debug("Rolled back request session")
            raise
        else:
            await session.commit()
