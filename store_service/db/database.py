from typing import Optional, AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
)
import structlog

from store_service.config import Settings
from store_service.models import Base

logger = structlog.get_logger(__name__)


class StoreDatabase:
    """Async SQLAlchemy engine and session factory for the store database"""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.engine: Optional[AsyncEngine] = None
        self.async_session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    async def initialize(self):
        """Create engine, test the connection and create tables if enabled"""
        engine_kwargs = {"echo": self.settings.db_echo}
        if not self.settings.is_sqlite:
            engine_kwargs.update(
                pool_size=self.settings.db_pool_size,
                max_overflow=self.settings.db_max_overflow,
                pool_pre_ping=True
            )

        try:
            self.engine = create_async_engine(self.settings.database_url, **engine_kwargs)
            self.async_session_maker = async_sessionmaker(
                self.engine,
                class_=AsyncSession,
                expire_on_commit=False
            )

            async with self.engine.begin() as conn:
                await conn.execute(text("SELECT 1"))
                if self.settings.create_tables:
                    await conn.run_sync(Base.metadata.create_all)

            logger.info("Database initialized", url=self.engine.url.render_as_string(hide_password=True))
        except Exception as e:
            logger.error("Failed to initialize database", error=str(e))
            raise

    async def close(self):
        """Dispose the engine and its connection pool"""
        if self.engine:
            await self.engine.dispose()
            self.engine = None
            self.async_session_maker = None
            logger.info("Database engine disposed")

    def session(self) -> AsyncSession:
        if self.async_session_maker is None:
            raise RuntimeError("Database not initialized")
        return self.async_session_maker()

    async def ping(self) -> bool:
        """Run a trivial query, raising if the database is unreachable"""
        async with self.session() as session:
            result = await session.execute(text("SELECT 1"))
            return result.scalar() == 1


def get_database(request: Request) -> StoreDatabase:
    """Dependency to get database instance"""
    return request.app.state.db


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Dependency yielding a session scoped to one request"""
    async with get_database(request).session() as session:
        yield session
