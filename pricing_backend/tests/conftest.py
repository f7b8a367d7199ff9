"""
Centralized Test Configuration.
"""

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event, func, select
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from pricing_backend.app.main import app
from pricing_backend.app.db.session import Base
from pricing_backend.app.core.dependencies import get_pricing_service
from pricing_backend.app.domain.pricing.pricing_service import PricingService

# Setup In-Memory Test Database
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# Event handler to enable foreign keys for SQLite
@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    """Enable foreign key constraints for SQLite."""
    if 'sqlite' in str(type(dbapi_conn)).lower():
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


@pytest.fixture
async def db_engine():
    """Fresh in-memory database with all tables, per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def pricing_service(session_factory):
    return PricingService(session_factory)


@pytest.fixture
async def db_session(session_factory):
    """Shared session for fixture data creation and assertions."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(pricing_service):
    """Async client for testing, wired to the test database."""
    app.dependency_overrides[get_pricing_service] = lambda: pricing_service
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides = {}


@pytest.fixture
def count_rows(session_factory):
    """Count rows of a model in a fresh session (sees only committed data)."""
    async def _count(model) -> int:
        async with session_factory() as session:
            result = await session.execute(select(func.count()).select_from(model))
            return result.scalar_one()
    return _count


@pytest.fixture
async def seeded_rule(pricing_service, session_factory):
    """
    Register FoodHut / perishable icecake / zone 'central' with
    base 5 km, fix 10, 1.5 per km. Returns the organization id as a string.
    """
    from pricing_backend.app.models.organization import Organization

    result = await pricing_service.create_or_update_pricing_rule(
        "FoodHut", "central", "perishable", "icecake", 5, 1.5, 10
    )
    assert result["success"] is True

    async with session_factory() as session:
        organization = (
            await session.execute(select(Organization).where(Organization.name == "FoodHut"))
        ).scalar_one()
    return str(organization.id)
