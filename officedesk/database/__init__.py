from officedesk.database.base import Base, IntegerPrimaryKeyMixin, TimestampMixin
from officedesk.database.engine import async_session, engine
from officedesk.database.session import get_db

__all__ = [
    "Base",
    "IntegerPrimaryKeyMixin",
    "TimestampMixin",
    "async_session",
    "engine",
    "get_db",
]
