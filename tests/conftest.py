"""Shared pytest setup for the Roster test suite.

Layout:
    tests/unit/                    domain, application, persistence, CLI;
                                   every test gets its own SQLite file
    tests/integration/api/         HTTP through FastAPI's TestClient (SQLite)
    tests/integration/persistence/ PostgreSQL via testcontainers, marked
                                   ``integration`` and skipped by default
    tests/shared/                  fixtures and factories

Tests marked ``integration`` run when ``--run-integration`` or
``--run-all`` is passed, or when RUN_INTEGRATION / RUN_ALL_TESTS is set
to a truthy value.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from roster_config import clear_settings_cache

CONFIG_DIR = Path(__file__).resolve().parents[1] / "config"

# Same env file precedence as local development
for env_file in (CONFIG_DIR / ".env.dev", CONFIG_DIR / ".env"):
    if env_file.exists():
        load_dotenv(env_file)
        break

TRUTHY = {"1", "true", "yes"}


def _flag(name: str) -> bool:
    return os.environ.get(name, "").lower() in TRUTHY


def pytest_addoption(parser):
    group = parser.getgroup("roster")
    group.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="also run tests marked integration (needs Docker)",
    )
    group.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="run every collected test",
    )


def _integration_enabled(config) -> bool:
    return (
        config.getoption("--run-all")
        or config.getoption("--run-integration")
        or _flag("RUN_ALL_TESTS")
        or _flag("RUN_INTEGRATION")
    )


def pytest_collection_modifyitems(config, items):
    if _integration_enabled(config):
        return

    skip = pytest.mark.skip(
        reason="needs --run-integration or RUN_INTEGRATION=1",
    )
    for item in items:
        if item.get_closest_marker("integration") is not None:
            item.add_marker(skip)


@pytest.fixture(scope="session", autouse=True)
def fresh_settings_cache():
    clear_settings_cache()
    yield
    clear_settings_cache()
