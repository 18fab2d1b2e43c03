"""Role aggregate."""

from datetime import datetime
from uuid import UUID, uuid4

from roster.domain.role.exceptions import InvalidRoleDataError
from roster.domain.shared.time import utc_now

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 500


def _validated_name(name: str) -> str:
    if name is None:
        msg = "Role name is required"
        raise InvalidRoleDataError(msg, field="name")
    stripped = name.strip()
    if not NAME_MIN_LENGTH <= len(stripped) <= NAME_MAX_LENGTH:
        msg = (
            f"Role name must be between {NAME_MIN_LENGTH} and "
            f"{NAME_MAX_LENGTH} characters"
        )
        raise InvalidRoleDataError(msg, field="name")
    return stripped


def _validated_description(description: str | None) -> str | None:
    if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
        msg = f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters"
        raise InvalidRoleDataError(msg, field="description")
    return description


class Role:
    """Role aggregate root. Names are unique across the store."""

    def __init__(  # NOQA: PLR0913
        self,
        name: str,
        description: str | None = None,
        is_active: bool = True,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._name = _validated_name(name)
        self._description = _validated_description(description)
        self._is_active = is_active
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str | None:
        return self._description

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def rename(self, name: str) -> None:
        self._name = _validated_name(name)
        self._updated_at = utc_now()

    def describe(self, description: str | None) -> None:
        self._description = _validated_description(description)
        self._updated_at = utc_now()

    def activate(self) -> None:
        self._is_active = True
        self._updated_at = utc_now()

    def deactivate(self) -> None:
        self._is_active = False
        self._updated_at = utc_now()

    @classmethod
    def create(cls, name: str, description: str | None = None) -> "Role":
        return cls(name=name, description=description)

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        name: str,
        description: str | None,
        is_active: bool,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Role":
        return cls(
            id=id,
            name=name,
            description=description,
            is_active=is_active,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Role):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Role(id={self._id}, name={self._name!r})"
