"""API routers."""

from roster.presentation.api.routers.roles import router as roles_router
from roster.presentation.api.routers.transactions import (
    router as transactions_router,
)
from roster.presentation.api.routers.users import router as users_router

__all__ = ["roles_router", "transactions_router", "users_router"]
