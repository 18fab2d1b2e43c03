"""SQLAlchemy models. Importing this package registers every table."""

from roster.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from roster.infrastructure.persistence.sqlalchemy.models.profile_model import (
    ProfileModel,
)
from roster.infrastructure.persistence.sqlalchemy.models.role_model import RoleModel
from roster.infrastructure.persistence.sqlalchemy.models.user_model import UserModel
from roster.infrastructure.persistence.sqlalchemy.models.user_role_model import (
    UserRoleModel,
)

__all__ = [
    "Base",
    "ProfileModel",
    "RoleModel",
    "TimestampMixin",
    "UserModel",
    "UserRoleModel",
]
