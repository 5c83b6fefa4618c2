"""
Database configuration and session management.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

from invoicer.config import settings


# Create declarative base
Base = declarative_base()


def create_engine_for(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine. Connections are not pooled; every session
    opens its own connection.
    """
    return create_async_engine(
        database_url,
        poolclass=NullPool,
        echo=echo,
    )


def create_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=bind,
        autoflush=False,
        expire_on_commit=False,
    )


# Create SQLAlchemy engine
engine = create_engine_for(settings.database_url, echo=settings.debug)

# Create SessionLocal class
SessionLocal = create_session_factory(engine)


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Dependency function to get the session factory.
    Repositories open one session per operation so reads can run concurrently.
    """
    return SessionLocal


async def init_models(bind: Optional[AsyncEngine] = None) -> None:
    """Create all tables. Used in development and tests; production runs migrations."""
    from invoicer.infrastructure.db import models  # noqa: F401 registers tables

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
