"""Integration test fixtures for the PostgreSQL collection store.

These fixtures require external resources (PostgreSQL database). Tests are
skipped when HUB_DATABASE_URL is not set.
"""

import asyncio
import os
from collections.abc import AsyncGenerator
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool

from src.hub.core import db
from src.hub.core.config import get_settings
from src.hub.core.db import run_migrations_sync
from src.hub.services import ProjectHub
from src.hub.stores import SqlCollectionStore
from tests.helpers import TickingClock
from tests.utils.cleanup import delete_prefixed_collections


def pytest_collection_modifyitems(config, items):
    if os.environ.get("HUB_DATABASE_URL"):
        return
    skip = pytest.mark.skip(reason="HUB_DATABASE_URL is not set")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(scope="function")
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Create test database engine and ensure migrations are applied."""
    await db.dispose_engine()

    get_settings.cache_clear()
    settings = get_settings()
    test_engine = create_async_engine(settings.database_url, poolclass=NullPool)

    await asyncio.to_thread(run_migrations_sync, "alembic.ini")

    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def collection_prefix(engine: AsyncEngine) -> AsyncGenerator[str]:
    """Unique collection prefix per test, removed afterwards."""
    prefix = f"t{uuid4().hex[:12]}_"
    yield prefix

    async with engine.connect() as conn:
        await delete_prefixed_collections(conn, prefix)
        await conn.commit()


@pytest.fixture
def sql_store(engine: AsyncEngine) -> SqlCollectionStore:
    return SqlCollectionStore(engine)


@pytest.fixture
def sql_hub(sql_store: SqlCollectionStore, collection_prefix: str) -> ProjectHub:
    return ProjectHub(sql_store, TickingClock(), collection_prefix)
