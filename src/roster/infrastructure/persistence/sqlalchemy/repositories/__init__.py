from roster.infrastructure.persistence.sqlalchemy.repositories.profile_repository import (  # NOQA: E501
    ProfileRepositorySQLAlchemy,
)
from roster.infrastructure.persistence.sqlalchemy.repositories.role_repository import (
    RoleRepositorySQLAlchemy,
)
from roster.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)
from roster.infrastructure.persistence.sqlalchemy.repositories.user_role_repository import (  # NOQA: E501
    UserRoleRepositorySQLAlchemy,
)

__all__ = [
    "ProfileRepositorySQLAlchemy",
    "RoleRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
    "UserRoleRepositorySQLAlchemy",
]
