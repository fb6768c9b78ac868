import os
from datetime import date

import pytest

os.environ.setdefault("MODE", "test")

from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool
from httpx import AsyncClient, ASGITransport

# Import the app and DB helpers from the project.
from main import app as fastapi_app
import db as project_db
import db_models  # noqa: F401  ensure models are imported
from db_base import Base
from core.deps import get_reference_date

# All date-sensitive tests run against this fixed "today"
REFERENCE_DATE = date(2025, 6, 30)


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture(scope="session")
def reference_date():
    return REFERENCE_DATE


@pytest.fixture(scope="session")
def database_path(tmp_path_factory):
    return tmp_path_factory.mktemp("data") / "test_depreciation.db"


@pytest.fixture(scope="session", autouse=True)
def prepare_db(database_path):
    # Create/drop tables for tests on a throwaway SQLite file
    sync_engine = create_engine(f"sqlite:///{database_path}")
    Base.metadata.drop_all(bind=sync_engine)
    Base.metadata.create_all(bind=sync_engine)
    yield
    Base.metadata.drop_all(bind=sync_engine)
    sync_engine.dispose()


@pytest.fixture(scope="session")
def session_factory(database_path, prepare_db):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{database_path}",
        future=True,
        echo=False,
        poolclass=NullPool,  # Disable connection pooling for tests
    )
    project_db.enable_sqlite_foreign_keys(engine.sync_engine)
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def async_client(session_factory):
    # Override the get_session dependency to create a fresh session for each request
    async def override_get_session():
        async with session_factory() as session:
            yield session

    fastapi_app.dependency_overrides[project_db.get_session] = override_get_session
    fastapi_app.dependency_overrides[get_reference_date] = lambda: REFERENCE_DATE

    async with AsyncClient(transport=ASGITransport(app=fastapi_app), base_url="http://testserver") as ac:
        yield ac

    # Clean up
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def asset_payload():
    """A valid asset body; tests copy and tweak it."""
    def _make(**overrides):
        payload = {
            "name": "Test Computer",
            "description": "Office workstation",
            "date_placed_in_service": "2024-01-15",
            "cost": 2000.00,
            "salvage_value": 200.00,
            "useful_life_years": 5,
            "property_class": "5",
        }
        payload.update(overrides)
        return payload
    return _make
