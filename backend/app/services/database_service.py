# backend/app/services/database_service.py
"""
Database service for async SQLAlchemy session management.

Provides a singleton service for managing database connections,
sessions, and health checks. Supports both SQLite (development)
and PostgreSQL (production).

Usage:
    from app.services.database_service import database_service

    # Get async session (context manager)
    async with database_service.get_session() as session:
        result = await session.execute(select(ContentItem).where(ContentItem.slug == slug))
        item = result.scalar_one_or_none()

    # Initialize database (create tables)
    await database_service.init_db()

    # Health check
    health = await database_service.health_check()
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ..config import settings
from ..database.base import Base


class DatabaseService:
    """
    Database service for managing async SQLAlchemy sessions.

    Singleton with a global instance. The engine is configured for SQLite
    (aiosqlite, no pooling options) or PostgreSQL (asyncpg, pooled) depending
    on the database URL.

    Methods:
        get_session(): Get async database session (context manager)
        init_db(): Initialize database (create all tables)
        drop_db(): Drop all tables
        health_check(): Check database connectivity
        close(): Close database engine and connections
    """

    def __init__(self, database_url: Optional[str] = None):
        self._logger = logging.getLogger("zaryab.database")
        self._database_url = database_url or settings.database_url
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker] = None
        self._initialize_engine()

    def _initialize_engine(self) -> None:
        """
        Initialize database engine based on the configured URL.

        SQLite Configuration:
            - Uses aiosqlite async driver
            - check_same_thread=False for async support
            - Creates data directory if needed

        PostgreSQL Configuration:
            - Uses asyncpg async driver
            - Connection pooling from settings (pool size, overflow, recycle)
            - Pool pre-ping for connection health
        """
        database_url = self._database_url
        self._logger.info(f"Initializing database: {database_url.split('@')[-1].split('?')[0]}")

        if database_url.startswith("sqlite"):
            if ":///" in database_url:
                db_path = database_url.split("///")[1].split("?")[0]
                db_dir = os.path.dirname(db_path)
                if db_dir and not os.path.exists(db_dir):
                    os.makedirs(db_dir, exist_ok=True)
                    self._logger.info(f"Created database directory: {db_dir}")

            self._engine = create_async_engine(
                database_url,
                connect_args={"check_same_thread": False},
                pool_pre_ping=True,
                echo=settings.debug,
            )
            self._logger.info("Using SQLite database (development mode)")
        else:
            self._engine = create_async_engine(
                database_url,
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_max_overflow,
                pool_pre_ping=True,
                pool_recycle=settings.db_pool_recycle,
                echo=settings.debug,
            )
            self._logger.info(
                f"Using PostgreSQL database (pool_size={settings.db_pool_size}, "
                f"max_overflow={settings.db_max_overflow})"
            )

        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get async database session as context manager.

        Automatically handles commit on success and rollback on error.

        Yields:
            AsyncSession: Async database session

        Raises:
            RuntimeError: If database is not initialized
            Exception: Any database errors (triggers rollback)
        """
        if not self._session_factory:
            raise RuntimeError("Database not initialized")

        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def init_db(self) -> None:
        """
        Create all tables defined in the models if they don't exist.

        Safe to call multiple times (won't recreate existing tables).
        """
        if not self._engine:
            raise RuntimeError("Database engine not initialized")

        self._logger.info("Creating database tables...")

        async with self._engine.begin() as conn:
            # Import all models to ensure they're registered with Base
            from ..database import models  # noqa: F401

            await conn.run_sync(Base.metadata.create_all)

        self._logger.info("Database tables created successfully")

    async def drop_db(self) -> None:
        """Drop all tables. Used by the seed command's --reset and by tests."""
        if not self._engine:
            raise RuntimeError("Database engine not initialized")

        async with self._engine.begin() as conn:
            from ..database import models  # noqa: F401

            await conn.run_sync(Base.metadata.drop_all)

        self._logger.warning("All database tables dropped")

    async def health_check(self) -> Dict[str, Any]:
        """
        Check database connectivity.

        Returns:
            Dict with ``status`` ("healthy"/"unhealthy"), ``database`` type
            and ``error`` when unhealthy.
        """
        db_type = "sqlite" if self._database_url.startswith("sqlite") else "postgresql"
        if not self._engine:
            return {"status": "unhealthy", "database": db_type, "error": "Database engine not initialized"}

        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return {"status": "healthy", "database": db_type}
        except Exception as e:
            self._logger.error(f"Database health check failed: {e}")
            return {"status": "unhealthy", "database": db_type, "error": str(e)}

    async def close(self) -> None:
        """Dispose the engine and all pooled connections."""
        if self._engine:
            await self._engine.dispose()
            self._logger.info("Database connections closed")


# Global database service instance
database_service = DatabaseService()
