"""Roster HTTP application.

``create_app`` builds the FastAPI instance; uvicorn calls it as a factory
(``roster serve``). Business endpoints live under ``/api/v1``; ``/health``
stays outside the versioned prefix.
"""

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from functools import lru_cache

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roster.infrastructure.persistence.sqlalchemy import create_tables
from roster.presentation.api.dependencies import get_engine
from roster.presentation.api.exception_handlers import setup_exception_handlers
from roster.presentation.api.routers import (
    roles_router,
    transactions_router,
    users_router,
)
from roster_config.settings import Settings, get_settings

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "asyncpg", "uvicorn.access")

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Send log records to stdout once per process.

    Roster packages log at LOG_LEVEL; database drivers and access logs
    are held at WARNING.
    """
    level = getattr(logging, get_settings().log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in ("roster", "roster_auth"):
        logging.getLogger(name).setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


OPENAPI_TAGS = [
    {
        "name": "Users",
        "description": (
            "User administration. Creating or updating a user also writes "
            "its profile and role assignments, all or nothing. PATCH applies "
            "only the fields present in the body."
        ),
    },
    {
        "name": "Roles",
        "description": "Role administration and role membership views.",
    },
    {
        "name": "Transactions",
        "description": (
            "Operations spanning many users and roles: bulk assignment, "
            "holder transfer, role deletion with reassignment and creation "
            "of a user together with a new role."
        ),
    },
    {"name": "Health", "description": "Liveness check."},
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    engine = get_engine()
    logger.info("Roster API %s starting", API_VERSION)
    try:
        await create_tables(engine)
    except (ConnectionRefusedError, OSError):
        logger.critical("Database unreachable, aborting startup")
        raise SystemExit(1) from None

    yield

    await engine.dispose()
    logger.info("Roster API stopped, database connections closed")


def create_v1_router() -> APIRouter:
    router = APIRouter()
    router.include_router(users_router, prefix="/users", tags=["Users"])
    router.include_router(roles_router, prefix="/roles", tags=["Roles"])
    router.include_router(
        transactions_router,
        prefix="/transactions",
        tags=["Transactions"],
    )
    return router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the Roster FastAPI application.

    Parameters
    ----------
    settings
        Settings to use instead of the cached environment settings.

    Returns
    -------
    The application with CORS, error handlers and all routers mounted.
    Interactive docs are only served when ``API_DEBUG`` is on.
    """
    _configure_logging()
    settings = settings or get_settings()
    docs_enabled = settings.api_debug

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="User and role administration with transactional consistency.",
        version=API_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_exception_handlers(app)
    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health() -> dict:
        return {"status": "healthy", "version": API_VERSION, "api_versions": ["v1"]}

    return app
