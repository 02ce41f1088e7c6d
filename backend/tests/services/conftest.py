"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use a session from the test manager, so
      route errors pass through the same rollback and DatabaseError mapping
    - db_manager replaced so the readiness probe sees the test engine

Design Decisions:
    - StaticPool: every session shares the one in-memory connection, so rows
      committed through the API are visible to test_db
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from resource_api.db.base import Base
from resource_api.infrastructure.database import get_db, DatabaseSessionManager
from resource_api.services.resource_repository import SqlResourceRepository
import resource_api.infrastructure.database as db_module
import resource_api.models  # noqa: F401
from resource_api.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def repo(test_db):
    """Repository bound to the test session."""
    return SqlResourceRepository(test_db)


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory

    async def override_get_db():
        async with fake_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def make_resource(client):
    """POST a resource and return its JSON body."""
    async def _make(**fields):
        body = {"title": "Untitled", **fields}
        res = await client.post("/resources", json=body)
        assert res.status_code == 201, res.text
        return res.json()
    return _make
