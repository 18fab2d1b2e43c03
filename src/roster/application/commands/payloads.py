"""Input payloads for the user and role commands.

Update payloads are tri-state per field: ``UNSET`` means "leave as is",
``None`` means "clear" (where clearing is allowed) and any other value
means "set".
"""

from dataclasses import dataclass
from typing import Any, Final, TypeVar, Union
from uuid import UUID

T = TypeVar("T")


class Unset:
    """Marker type for a field that was not supplied."""

    _instance: "Unset | None" = None

    def __new__(cls) -> "Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Final = Unset()

Maybe = Union[T, None, Unset]


def is_set(value: Any) -> bool:
    """Return True when the field was supplied (including explicit None)."""
    return value is not UNSET


@dataclass(frozen=True)
class ProfileInput:
    """Profile fields; on update, unset fields keep their stored value."""

    bio: Maybe[str] = UNSET
    avatar_url: Maybe[str] = UNSET

    def value_or_none(self, name: str) -> str | None:
        value = getattr(self, name)
        return None if value is UNSET else value


@dataclass(frozen=True)
class UserChanges:
    """Partial update of a user, its primary role, roles and profile."""

    name: Maybe[str] = UNSET
    email: Maybe[str] = UNSET
    password: Maybe[str] = UNSET
    is_active: Maybe[bool] = UNSET
    primary_role_id: Maybe[UUID] = UNSET
    role_ids: Maybe[list[UUID]] = UNSET
    profile: Maybe[ProfileInput] = UNSET


@dataclass(frozen=True)
class RoleChanges:
    """Partial update of a role."""

    name: Maybe[str] = UNSET
    description: Maybe[str] = UNSET
    is_active: Maybe[bool] = UNSET


