"""Database Session Manager — schema creation, error mapping, health checks.

Invariants:
    - SQLAlchemy errors inside a session surface as DatabaseError
    - File-backed stores get their directory created and run in WAL mode
"""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from resource_api.core.errors import DatabaseError
from resource_api.infrastructure.database import (
    DatabaseSessionManager, ensure_sqlite_directory,
)


@pytest.fixture
async def file_manager(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'nested' / 'dir' / 'resources.sqlite'}"
    manager = DatabaseSessionManager(url)
    yield manager
    await manager.dispose()


async def test_manager_creates_directory_and_schema(file_manager, tmp_path):
    """Missing parent directory and table are created."""
    await file_manager.create_schema()
    assert (tmp_path / "nested" / "dir").is_dir()
    async with file_manager.session() as db:
        result = await db.execute(text(
            "SELECT name FROM sqlite_master WHERE type='table' AND name='resources'",
        ))
        assert result.scalar_one() == "resources"


async def test_file_store_uses_wal_journal(file_manager):
    """File-backed connections run in WAL mode."""
    async with file_manager.session() as db:
        mode = (await db.execute(text("PRAGMA journal_mode"))).scalar_one()
    assert mode.lower() == "wal"


async def test_create_schema_is_idempotent(file_manager):
    """create_schema can run twice."""
    await file_manager.create_schema()
    await file_manager.create_schema()


async def test_operational_error_mapped_to_database_error(file_manager):
    """OperationalError inside a session → DatabaseError."""
    with pytest.raises(DatabaseError) as info:
        async with file_manager.session():
            raise OperationalError("SELECT 1", {}, Exception("disk I/O error"))
    assert info.value.operation == "execute"
    assert info.value.http_status == 500


async def test_health_check_true_for_reachable_store(file_manager):
    """health_check is True for a reachable store."""
    assert await file_manager.health_check() is True


def test_ensure_sqlite_directory_ignores_memory_and_other_drivers(tmp_path):
    """Only file-backed SQLite URLs create directories."""
    ensure_sqlite_directory("sqlite+aiosqlite:///:memory:")
    ensure_sqlite_directory("postgresql+asyncpg://u:p@localhost/db")
