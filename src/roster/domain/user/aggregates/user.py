"""User aggregate."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from roster.domain.shared.time import utc_now
from roster.domain.user.exceptions import InvalidUserDataError
from roster.domain.user.value_objects.email import Email

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100


def _validated_name(name: str) -> str:
    if name is None:
        msg = "Name is required"
        raise InvalidUserDataError(msg, field="name")
    stripped = name.strip()
    if not NAME_MIN_LENGTH <= len(stripped) <= NAME_MAX_LENGTH:
        msg = (
            f"Name must be between {NAME_MIN_LENGTH} and "
            f"{NAME_MAX_LENGTH} characters"
        )
        raise InvalidUserDataError(msg, field="name")
    return stripped


class User:
    """
    User aggregate root.

    Holds identity and account state. The password is only ever held as a
    hash produced by the credential capability; the primary role is a
    non-owning reference to a Role id.
    """

    def __init__(  # NOQA: PLR0913
        self,
        name: str,
        email: Union[str, Email],
        password_hash: str,
        primary_role_id: UUID | None = None,
        is_active: bool = True,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        if not password_hash:
            msg = "Password hash is required"
            raise InvalidUserDataError(msg, field="password")
        self._id = id or uuid4()
        self._name = _validated_name(name)
        self._email = email if isinstance(email, Email) else Email(email)
        self._password_hash = password_hash
        self._primary_role_id = primary_role_id
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
    def email(self) -> str:
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def primary_role_id(self) -> UUID | None:
        return self._primary_role_id

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
        self._touch()

    def change_email(self, email: Union[str, Email]) -> None:
        self._email = email if isinstance(email, Email) else Email(email)
        self._touch()

    def change_password_hash(self, password_hash: str) -> None:
        if not password_hash:
            msg = "Password hash is required"
            raise InvalidUserDataError(msg, field="password")
        self._password_hash = password_hash
        self._touch()

    def assign_primary_role(self, role_id: UUID | None) -> None:
        """Point the primary role at ``role_id``, or clear it with None."""
        self._primary_role_id = role_id
        self._touch()

    def activate(self) -> None:
        self._is_active = True
        self._touch()

    def deactivate(self) -> None:
        self._is_active = False
        self._touch()

    def _touch(self) -> None:
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        name: str,
        email: Union[str, Email],
        password_hash: str,
        primary_role_id: UUID | None = None,
    ) -> "User":
        return cls(
            name=name,
            email=email,
            password_hash=password_hash,
            primary_role_id=primary_role_id,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        name: str,
        email: Union[str, Email],
        password_hash: str,
        primary_role_id: UUID | None,
        is_active: bool,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            name=name,
            email=email,
            password_hash=password_hash,
            primary_role_id=primary_role_id,
            is_active=is_active,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
