"""Profile entity, owned by exactly one user."""

from datetime import datetime
from uuid import UUID, uuid4

from roster.domain.shared.time import utc_now
from roster.domain.user.exceptions import InvalidUserDataError

BIO_MAX_LENGTH = 1000
AVATAR_URL_MAX_LENGTH = 500


def _check_length(value: str | None, limit: int, field: str) -> str | None:
    if value is not None and len(value) > limit:
        msg = f"{field} cannot exceed {limit} characters"
        raise InvalidUserDataError(msg, field=field)
    return value


class Profile:
    """Optional descriptive data for a user (bio, avatar)."""

    def __init__(  # NOQA: PLR0913
        self,
        user_id: UUID,
        bio: str | None = None,
        avatar_url: str | None = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._user_id = user_id
        self._bio = _check_length(bio, BIO_MAX_LENGTH, "bio")
        self._avatar_url = _check_length(
            avatar_url,
            AVATAR_URL_MAX_LENGTH,
            "avatar_url",
        )
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def bio(self) -> str | None:
        return self._bio

    @property
    def avatar_url(self) -> str | None:
        return self._avatar_url

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def change_bio(self, bio: str | None) -> None:
        self._bio = _check_length(bio, BIO_MAX_LENGTH, "bio")
        self._updated_at = utc_now()

    def change_avatar_url(self, avatar_url: str | None) -> None:
        self._avatar_url = _check_length(
            avatar_url,
            AVATAR_URL_MAX_LENGTH,
            "avatar_url",
        )
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        user_id: UUID,
        bio: str | None = None,
        avatar_url: str | None = None,
    ) -> "Profile":
        return cls(user_id=user_id, bio=bio, avatar_url=avatar_url)

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        user_id: UUID,
        bio: str | None,
        avatar_url: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Profile":
        return cls(
            id=id,
            user_id=user_id,
            bio=bio,
            avatar_url=avatar_url,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Profile):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Profile(id={self._id}, user_id={self._user_id})"
