"""Async engine and session factory shared by the API and the seeder."""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from officedesk.config import settings

# SQL echo follows the application log level
engine = create_async_engine(
    settings.database_url,
    pool_size=10,
    max_overflow=5,
    pool_pre_ping=True,
    pool_recycle=1800,
    echo=settings.log_level.upper() == "DEBUG",
)

async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
