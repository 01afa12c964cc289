import asyncio
import os
import tempfile
from datetime import date

import pytest
from fastapi.testclient import TestClient

# Settings are read at import time, so point them at a scratch database first
_TEST_DB_DIR = tempfile.mkdtemp(prefix="fitlog-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_DIR}/test_fitness.db"
os.environ["SEED_SAMPLE_DATA"] = "false"
os.environ["LOG_FORMAT"] = "console"

REFERENCE_DATE = date(2024, 6, 3)


async def _clear_tables() -> None:
    from fitlog.core.database import Base, engine

    async with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            await conn.execute(table.delete())


async def _insert_rows(rows: list[dict]) -> None:
    from fitlog.core.database import AsyncSessionLocal
    from fitlog.models.workout import Workout

    async with AsyncSessionLocal() as session:
        session.add_all([Workout(**row) for row in rows])
        await session.commit()


@pytest.fixture()
def client():
    from fitlog.api.stats import get_reference_date
    from fitlog.main import app

    app.dependency_overrides[get_reference_date] = lambda: REFERENCE_DATE

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
    asyncio.run(_clear_tables())


@pytest.fixture()
def insert_rows(client: TestClient):
    """Write rows straight to the table, bypassing request validation."""
    def _insert(*rows: dict) -> None:
        asyncio.run(_insert_rows(list(rows)))
    return _insert
