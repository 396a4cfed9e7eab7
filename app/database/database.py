# app/database/database.py
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from app.core.config import Settings

logger = logging.getLogger(__name__)

Base = declarative_base()


class Database:
    """
    One engine and connection pool for the lifetime of the process.
    Sessions are checked out per request through session().
    """

    def __init__(self, settings: Settings):
        url = make_url(settings.database_url)
        engine_kwargs = {"echo": settings.DB_ECHO}
        # SQLite uses its own pool class which takes no sizing arguments
        if url.get_backend_name() != "sqlite":
            engine_kwargs.update(
                pool_size=settings.DB_POOL_SIZE,
                max_overflow=settings.DB_MAX_OVERFLOW,
                pool_timeout=settings.DB_POOL_TIMEOUT,
                pool_recycle=settings.DB_POOL_RECYCLE,
                pool_pre_ping=True,
            )
        self.url = url
        self.engine = create_async_engine(url, **engine_kwargs)
        self.SessionLocal = async_sessionmaker(
            bind=self.engine, autoflush=False, expire_on_commit=False
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        db = self.SessionLocal()
        try:
            yield db
        finally:
            await db.close()

    async def create_all(self) -> None:
        # Make sure the models are registered on Base.metadata
        from app.models import contacts  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database connection pool closed")


# Define the get_database dependency
def get_database(request: Request) -> Database:
    return request.app.state.database
