"""
Database Configuration for ClickNGoAI

Async SQLAlchemy engine and session management.

The DatabaseManager is constructed once by the application lifespan,
stored on ``app.state.db_manager`` and disposed at shutdown. Request
handlers receive sessions through ``get_session``.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    create_async_engine,
    async_sessionmaker,
    AsyncEngine,
)
from sqlalchemy import text
from sqlmodel import SQLModel

from app.config.settings import Settings
from app.infrastructure.exceptions import ConfigurationError


def normalize_database_url(database_url: str) -> str:
    """Map plain PostgreSQL URLs onto the asyncpg driver."""
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if database_url.startswith("postgres://"):
        return database_url.replace("postgres://", "postgresql+asyncpg://", 1)
    return database_url


class DatabaseManager:
    """
    Owns the async engine and session factory for one process.

    Args:
        database_url: SQLAlchemy URL (``postgres://`` URLs are normalized)
        echo: Log emitted SQL
        pool_size / max_overflow / pool_timeout: Pool tuning, ignored for SQLite
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 5,
        max_overflow: int = 10,
        pool_timeout: int = 30,
    ):
        self._database_url = normalize_database_url(database_url)

        engine_kwargs = {"echo": echo}
        if not self.is_sqlite:
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_timeout=pool_timeout,
                pool_pre_ping=True,  # Verify connections before use
            )

        self._engine: Optional[AsyncEngine] = create_async_engine(
            self._database_url, **engine_kwargs
        )
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "DatabaseManager":
        if not settings.database_url:
            raise ConfigurationError(
                "DATABASE_URL is required",
                missing_keys=["DATABASE_URL"],
            )
        return cls(
            settings.database_url,
            echo=settings.database_echo,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            pool_timeout=settings.database_pool_timeout,
        )

    @property
    def is_sqlite(self) -> bool:
        return self._database_url.startswith("sqlite")

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("DatabaseManager is closed")
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        if self._session_factory is None:
            raise RuntimeError("DatabaseManager is closed")
        return self._session_factory

    async def ping(self) -> None:
        """Verify the connection works."""
        async with self.session_factory() as session:
            await session.execute(text("SELECT 1"))

    async def create_tables(self) -> None:
        """Create all tables from SQLModel metadata."""
        # Register every table on the metadata
        import app.infrastructure.db.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    @asynccontextmanager
    async def session_scope(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Transactional session outside FastAPI requests.

        Usage:
            async with db.session_scope() as session:
                result = await session.execute(query)
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def close(self) -> None:
        """Close engine and dispose of connection pool."""
        if self._engine:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None


def get_db_manager(request: Request) -> DatabaseManager:
    """Return the DatabaseManager attached by the application lifespan."""
    return request.app.state.db_manager


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency injection for async database sessions.

    One session per request: committed when the handler returns,
    rolled back when it raises.

    Usage in FastAPI:
        @app.get("/items")
        async def get_items(session: AsyncSession = Depends(get_session)):
            ...
    """
    async with get_db_manager(request).session_scope() as session:
        yield session
