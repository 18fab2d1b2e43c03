from roster.application.services.entity_lookup import (
    load_user_details,
    require_role,
    require_roles,
    require_user,
    require_users,
    unique_ids,
)

__all__ = [
    "load_user_details",
    "require_role",
    "require_roles",
    "require_user",
    "require_users",
    "unique_ids",
]
