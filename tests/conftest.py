"""Shared fixtures: an app wired to an in-memory Motor client and an HTTPX client."""
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from mongomock_motor import AsyncMongoMockClient

from config import Settings
from database import Database
from main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(mongodb_uri=None, static_dir=str(tmp_path / "public"), log_level="WARNING")


@pytest.fixture
def database():
    return Database(AsyncMongoMockClient(), "test_db")


@pytest_asyncio.fixture
async def client(settings, database):
    app = create_app(settings=settings, database=database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def offline_client(settings):
    """Client for an app whose database was never configured."""
    app = create_app(settings=settings, database=Database(None, "test_db"))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
