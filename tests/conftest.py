from collections.abc import AsyncIterator
from pathlib import Path

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.db.session import Store
from marketplace.dependencies import get_store
from marketplace.main import app
from tests.factories import database_url

# Pytest only picks up fixtures from conftest.py files. Fixtures defined in other
# modules (like tests/seeds.py) are invisible unless we register them here.
pytest_plugins = ["tests.seeds"]


@pytest_asyncio.fixture
async def store(tmp_path: Path) -> AsyncIterator[Store]:
    """A migrated, empty store backed by a fresh database file."""
    store = Store(database_url(tmp_path / "marketplace.db"))
    await store.init()
    yield store
    await store.dispose()


@pytest_asyncio.fixture
async def db(store: Store) -> AsyncIterator[AsyncSession]:
    async with store.sessionmaker() as session:
        yield session


@pytest_asyncio.fixture
async def client(store: Store) -> AsyncIterator[AsyncClient]:
    """HTTP client whose requests run against the test store."""
    app.dependency_overrides[get_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()
