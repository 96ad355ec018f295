import asyncio
import os
from collections.abc import Generator
from pathlib import Path

import pytest

from receipt_parser.config.settings import Settings
from receipt_parser.database.connection import close_pool, get_connection, init_pool

_SCHEMA_PATH = Path(__file__).parents[2] / "receipt_parser" / "database" / "schema.sql"


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "receipts_test")
    return Settings()


async def _apply_schema() -> None:
    async with get_connection() as conn:
        await conn.execute(_SCHEMA_PATH.read_text(encoding="utf-8"))
        await conn.commit()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture
def integration_db(test_settings: Settings) -> Generator[asyncio.AbstractEventLoop, None, None]:
    """Open the pool on a dedicated event loop and yield that loop to the test."""
    loop = asyncio.new_event_loop()
    try:
        loop.run_until_complete(init_pool(test_settings))
        loop.run_until_complete(_apply_schema())
    except Exception as e:
        loop.run_until_complete(close_pool())
        loop.close()
        pytest.skip(
            f"PostgreSQL test DB not available: {e}. Set DB_* env to point at a test database"
        )
    try:
        yield loop
    finally:
        loop.run_until_complete(close_pool())
        loop.close()


@pytest.fixture
def integration_cleanup(
    integration_db: asyncio.AbstractEventLoop,
) -> Generator[list[int], None, None]:
    expense_ids: list[int] = []
    yield expense_ids
    if not expense_ids:
        return

    async def cleanup() -> None:
        async with get_connection() as conn:
            await conn.execute("DELETE FROM expenses WHERE id = ANY(%s)", (expense_ids,))
            await conn.commit()

    integration_db.run_until_complete(cleanup())
