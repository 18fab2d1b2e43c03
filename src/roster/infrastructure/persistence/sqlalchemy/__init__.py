"""SQLAlchemy persistence adapter."""

from roster.infrastructure.persistence.sqlalchemy.engine import (
    build_engine,
    build_session_maker,
)
from roster.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    drop_tables,
)
from roster.infrastructure.persistence.sqlalchemy.unit_of_work import (
    SQLAlchemyUnitOfWork,
)

__all__ = [
    "SQLAlchemyUnitOfWork",
    "build_engine",
    "build_session_maker",
    "create_tables",
    "drop_tables",
]
