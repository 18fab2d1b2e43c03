from tests.shared.fixtures.postgres import (  # noqa: F401
    postgres_container,
    postgres_session_maker,
    postgres_url,
)
