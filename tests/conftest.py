"""
Shared fixtures: an in-memory SQLite database per test and an HTTP client
bound to it.
"""
import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("DATABASE_CREATE_TABLES_ON_STARTUP", "false")
os.environ.setdefault("LOG_FORMAT", "text")

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.core.db import Base, get_db
from app.models.favorite import FavoriteTranslation
from app.models.translation import Translation


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def async_client(session_factory):
    from app.main import app

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def now():
    return datetime.now(timezone.utc).replace(microsecond=0)


@pytest.fixture
def make_translation(db_session, now):
    """Insert a translation directly, optionally backdated by ``minutes_ago``."""

    async def _make(
        source_text="hello",
        translated_text="你好",
        source_language="en",
        target_language="zh",
        user_id=None,
        minutes_ago=0,
    ):
        translation = Translation(
            source_text=source_text,
            translated_text=translated_text,
            source_language=source_language,
            target_language=target_language,
            user_id=user_id,
            created_at=now - timedelta(minutes=minutes_ago),
        )
        db_session.add(translation)
        await db_session.commit()
        await db_session.refresh(translation)
        return translation

    return _make


@pytest.fixture
def make_favorite(db_session, now):
    """Insert a favorite marker directly, optionally backdated by ``minutes_ago``."""

    async def _make(translation_id, user_id, minutes_ago=0):
        favorite = FavoriteTranslation(
            translation_id=translation_id,
            user_id=user_id,
            created_at=now - timedelta(minutes=minutes_ago),
        )
        db_session.add(favorite)
        await db_session.commit()
        await db_session.refresh(favorite)
        return favorite

    return _make
