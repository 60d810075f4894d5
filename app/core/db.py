from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base
from typing import AsyncGenerator

from app.config import get_settings

settings = get_settings()


def build_engine(url: str, echo: bool = False, pool_pre_ping: bool = True) -> AsyncEngine:
    return create_async_engine(url, echo=echo, pool_pre_ping=pool_pre_ping)


engine = build_engine(
    settings.database.url,
    echo=settings.database.echo,
    pool_pre_ping=settings.database.pool_pre_ping,
)
SessionLocal = async_sessionmaker(
    bind=engine, autoflush=False, expire_on_commit=False
)

# SQLAlchemy declarative base for models
Base = declarative_base()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    async with SessionLocal() as db:
        yield db


async def create_tables(bind: AsyncEngine = engine) -> None:
    """Create any missing tables for the registered models."""
    # Registers the mapped classes on Base.metadata
    import app.models  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
