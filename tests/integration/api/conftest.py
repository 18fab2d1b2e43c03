"""Fixtures for HTTP tests.

The application runs against a per-test SQLite file; the unit of work
and password service dependencies are overridden so no settings-driven
engine is ever created. The lifespan is not entered.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient

from roster.infrastructure.persistence.sqlalchemy import (
    SQLAlchemyUnitOfWork,
    build_engine,
    build_session_maker,
    create_tables,
)
from roster.presentation.api.app import create_app
from roster.presentation.api.dependencies import (
    get_password_service,
    get_unit_of_work,
)
from roster_auth import PasswordHashingService


@pytest.fixture
def client(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'api.db'}")
    asyncio.run(create_tables(engine))
    session_maker = build_session_maker(engine)
    password_service = PasswordHashingService(rounds=4)

    app = create_app()
    app.dependency_overrides[get_unit_of_work] = lambda: SQLAlchemyUnitOfWork(
        session_maker,
    )
    app.dependency_overrides[get_password_service] = lambda: password_service

    yield TestClient(app)

    app.dependency_overrides.clear()
    asyncio.run(engine.dispose())
