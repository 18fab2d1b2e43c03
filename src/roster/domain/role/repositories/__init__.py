from roster.domain.role.repositories.role_repository import RoleRepository
from roster.domain.role.repositories.user_role_repository import UserRoleRepository

__all__ = ["RoleRepository", "UserRoleRepository"]
