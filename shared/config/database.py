from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from .settings import Settings

logger = structlog.get_logger(__name__)

Base = declarative_base()


class Database:
    """
    Owns the engine (and therefore the connection pool) for the lifetime
    of the application. Requests borrow sessions through session().
    """

    def __init__(self, url: str | URL, **engine_kwargs):
        self.engine = create_async_engine(url, **engine_kwargs)
        self._session_factory = async_sessionmaker(self.engine, expire_on_commit=False)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.database_url,
            echo=settings.echo_sql,
            pool_size=settings.pool_size,
            max_overflow=settings.max_overflow,
            pool_pre_ping=True,
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        session = self._session_factory()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def create_all(self):
        # Import models so they register with Base
        from services.order_service import models as order_models  # noqa: F401
        from services.product_service import models as product_models  # noqa: F401
        from services.order_product_service import models as line_models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("schema_ready", tables=sorted(Base.metadata.tables.keys()))

    async def ping(self) -> bool:
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning("database_ping_failed", error=str(e))
            return False

    async def dispose(self):
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    database: Database | None = getattr(request.app.state, "db", None)
    if database is None:
        raise RuntimeError("Database not initialized")
    async with database.session() as session:
        yield session
