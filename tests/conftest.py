"""
Shared fixtures for the test suite.
"""

import os

import pytest
import pytest_asyncio
from sqlalchemy import event

# Set env vars before any application modules are imported
os.environ.setdefault("POSTGRES_USER", "test")
os.environ.setdefault("POSTGRES_PASSWORD", "test")
os.environ.setdefault("POSTGRES_HOST", "localhost")
os.environ.setdefault("POSTGRES_DB", "causes_test")

from src.db.repo_holder import RepoHolder  # noqa: E402
from src.db.utils import create_db_tables, create_session_pool  # noqa: E402
from src.services.revalidation import PathRevalidator  # noqa: E402


@pytest_asyncio.fixture
async def session_pool(tmp_path):
    """Fresh SQLite database per test."""
    engine, pool = create_session_pool(f"sqlite+aiosqlite:///{tmp_path / 'causes.db'}")

    @event.listens_for(engine.sync_engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    await create_db_tables(engine)

    yield pool

    await engine.dispose()


@pytest_asyncio.fixture
async def repo(session_pool):
    async with session_pool() as session:
        yield RepoHolder(session)


@pytest.fixture
def revalidated_paths():
    return []


@pytest.fixture
def revalidator(revalidated_paths):
    revalidator = PathRevalidator()
    revalidator.subscribe(revalidated_paths.append)
    return revalidator


@pytest_asyncio.fixture
async def owner(repo):
    user = await repo.user.get_or_create("owner@example.com")
    await repo.profile.set_full_name(user.id, "Olga Owner")
    return user


@pytest_asyncio.fixture
async def stranger(repo):
    user = await repo.user.get_or_create("stranger@example.com")
    await repo.profile.set_full_name(user.id, "Sam Stranger")
    return user


@pytest.fixture
def cause_form():
    return {
        "title": "Clean water",
        "description": "Drill two wells in the village.",
        "category": "community",
        "goal": "1500.50",
    }
