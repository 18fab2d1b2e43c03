from tests.shared.fixtures.database import (  # noqa: F401
    password_service,
    session_maker,
    sqlite_engine,
    unit_of_work,
)
