"""
Testcontainers-based PostgreSQL fixtures for integration tests.

Provides an ephemeral Postgres instance per test session; each test gets
a freshly created schema.
"""

import pytest
import pytest_asyncio
from testcontainers.postgres import PostgresContainer

from roster.infrastructure.persistence.sqlalchemy import (
    build_engine,
    build_session_maker,
    create_tables,
    drop_tables,
)

POSTGRES_IMAGE = "postgres:16-alpine"


@pytest.fixture(scope="session")
def postgres_container():
    """
    Start a PostgreSQL container for the test session.

    The container is automatically cleaned up when the session ends.
    """
    with PostgresContainer(POSTGRES_IMAGE) as postgres:
        yield postgres


@pytest.fixture(scope="session")
def postgres_url(postgres_container) -> str:
    connection_url = postgres_container.get_connection_url()
    # Testcontainers may return postgresql+psycopg2:// or postgresql://
    async_url = connection_url.replace(
        "postgresql+psycopg2://",
        "postgresql+asyncpg://",
    )
    return async_url.replace("postgresql://", "postgresql+asyncpg://")


@pytest_asyncio.fixture(scope="function")
async def postgres_session_maker(postgres_url):
    """Session factory on a clean schema, dropped again after the test."""
    engine = build_engine(postgres_url)
    await drop_tables(engine)
    await create_tables(engine)

    yield build_session_maker(engine)

    await drop_tables(engine)
    await engine.dispose()
