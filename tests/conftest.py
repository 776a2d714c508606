"""Shared test fixtures and utilities for all tests."""

import pytest
import pytest_asyncio
from dependency_injector import providers
from fastapi import FastAPI
from contextlib import asynccontextmanager
from httpx import ASGITransport, AsyncClient

from src.app.containers import Container
from src.app.main import create_app
from src.client import ClientRegistryClient
from src.shared.database.database import Database, DatabaseSettings
from src.shared.database.unit_of_work import UnitOfWork


@pytest.fixture
def async_db_url(tmp_path):
    """
    Async SQLite URL pointing at a throwaway database file.
    Function-scoped so every test starts from an empty file.
    """
    return f"sqlite+aiosqlite:///{tmp_path / 'clients.db'}"


@pytest_asyncio.fixture(scope="function")
async def db(async_db_url):
    """
    Create database instance with test database.
    Function-scoped for test isolation.
    """
    db = Database(DatabaseSettings(db_url=async_db_url))
    yield db
    await db.dispose()


@pytest_asyncio.fixture(scope="function")
async def clean_database(db):
    """
    Clean the database before each test.
    Drops and recreates all tables.
    """
    await db.drop_tables()
    await db.create_tables()
    yield db


@pytest.fixture(scope="function")
def test_container(clean_database):
    """
    Create a test container with database override for proper test isolation.
    Function-scoped to ensure each test gets a fresh container.

    Overrides the container's database singleton with the test database.
    """
    container = Container()
    container.database.override(providers.Object(clean_database))
    container.wire(modules=[
        "src.app.api.v1.clients",
    ])
    yield container
    container.database.reset_override()
    container.unwire()


@pytest_asyncio.fixture(scope="function")
async def test_app(test_container):
    """
    Create test application with container.
    Function-scoped for test isolation.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Database tables are already created by clean_database fixture
        yield

    yield create_app(test_container, lifespan=lifespan)


@pytest_asyncio.fixture
async def registry_client(test_app):
    """
    Create a registry client for testing.
    test_app already depends on clean_database for test isolation.
    """
    transport = ASGITransport(app=test_app)
    http_client = AsyncClient(transport=transport, base_url="http://test")
    client = ClientRegistryClient(base_url="http://test", client=http_client)

    async with client:
        yield client
    await http_client.aclose()


@pytest_asyncio.fixture(scope="function")
async def unit_of_work(clean_database, test_container):
    """
    Fixture for a UnitOfWork instance with a clean database.
    Uses the container's entity_mapper singleton.
    """
    entity_mapper = test_container.entity_mapper()
    yield UnitOfWork(clean_database, entity_mapper)


# =========================================================================
# Common repository and service fixtures (available to all test directories)
# =========================================================================

@pytest_asyncio.fixture
def client_repository(test_container):
    """Get client repository from container."""
    return test_container.client_repository()


@pytest_asyncio.fixture
def client_service(test_container):
    """Get client service from container."""
    return test_container.client_service()


@pytest_asyncio.fixture
def client_exporter(test_container):
    """Get client exporter from container."""
    return test_container.client_exporter()
