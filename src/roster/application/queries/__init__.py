"""Application queries (read-only use cases)."""

from roster.application.queries.get_role_query import GetRoleQuery
from roster.application.queries.get_user_query import GetUserQuery
from roster.application.queries.list_role_users_query import ListRoleUsersQuery
from roster.application.queries.list_roles_query import ListRolesQuery
from roster.application.queries.list_users_query import ListUsersQuery

__all__ = [
    "GetRoleQuery",
    "GetUserQuery",
    "ListRoleUsersQuery",
    "ListRolesQuery",
    "ListUsersQuery",
]
