"""
Pytest fixtures for mood catalog tests.

Each test gets its own SQLite file through aiosqlite, so the atomic upserts
and the per-operation transactions run against a real database engine.
"""
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from main import create_app
from routers.services import MoodCatalogService, UsageStatsService, MoodSyncService
from storage import Database


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'moods.db'}"


@pytest_asyncio.fixture
async def database(database_url):
    db = Database(database_url)
    await db.init()
    yield db
    await db.dispose()


@pytest.fixture
def catalog(database):
    return MoodCatalogService(database)


@pytest.fixture
def stats_service(database):
    return UsageStatsService(database)


@pytest.fixture
def sync_service(catalog, stats_service):
    return MoodSyncService(catalog, stats_service)


@pytest.fixture
def client(database_url):
    """HTTP client; the app lifespan creates the tables and disposes the engine."""
    app = create_app(Database(database_url))
    with TestClient(app) as test_client:
        yield test_client
