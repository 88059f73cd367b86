"""
Database connection and session management for PostgreSQL.
Handles async database operations with SQLAlchemy and connection pooling.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.pool import StaticPool
from sqlalchemy import text, Integer
from lightbnb.config import settings
from functools import lru_cache
from typing import AsyncGenerator, Optional
import logging

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all database models.
    Every LightBnB table uses a serial integer primary key.
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    def __repr__(self) -> str:
        """String representation of the model."""
        return f"<{self.__class__.__name__}(id={self.id})>"


class Database:
    """
    Owns the connection pool for one store.

    The engine is the pool; sessions made by ``session_factory`` check
    connections out of it. Repositories never create their own engine, they
    receive a session from whoever holds the ``Database``.
    """

    def __init__(self, url: str, echo: bool = False, application_name: str = "lightbnb"):
        self.url = url
        self.engine: AsyncEngine = self._create_engine(url, echo, application_name)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @staticmethod
    def _create_engine(url: str, echo: bool, application_name: str) -> AsyncEngine:
        if url.startswith("sqlite"):
            # In-memory SQLite lives inside one connection, so share it
            return create_async_engine(
                url,
                echo=echo,
                poolclass=StaticPool,
                connect_args={"check_same_thread": False},
            )

        return create_async_engine(
            url,
            echo=echo,
            pool_pre_ping=True,  # Validate connections before use
            connect_args={
                "server_settings": {
                    "application_name": application_name,
                }
            },
        )

    async def test_connection(self) -> bool:
        """
        Test database connectivity.
        Returns True if connection is successful, False otherwise.
        """
        try:
            async with self.session_factory() as session:
                result = await session.execute(text("SELECT 1"))
                result.scalar()
                logger.info("Database connection successful")
                return True
        except Exception as e:
            logger.error(f"Database connection failed: {e}")
            return False

    async def create_tables(self) -> None:
        """
        Create all database tables.
        Used by development setups and the test suite; there are no migrations.
        """
        # Register every model on Base.metadata
        import lightbnb.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
            logger.info("Database tables created successfully")

    async def drop_tables(self) -> None:
        """
        Drop all database tables.
        This should only be used in testing or development.
        """
        if settings.is_production:
            raise RuntimeError("Cannot drop tables in production environment")

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            logger.info("Database tables dropped successfully")

    async def close(self) -> None:
        """Dispose of the pool. Called during application shutdown."""
        await self.engine.dispose()
        logger.info("Database connections closed")


@lru_cache()
def get_database() -> Database:
    """
    Get the process-wide database.
    Created on first use so importing this module never opens a pool.
    """
    url = settings.test_database_url if settings.is_testing else settings.database_url
    return Database(url, echo=settings.debug)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency to get database session.
    Yields an async database session and ensures it's closed after use.
    """
    async with get_database().session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def test_database_connection(database: Optional[Database] = None) -> bool:
    """Check connectivity of the given database, or the process-wide one."""
    return await (database or get_database()).test_connection()
