from roster.domain.user.repositories.profile_repository import ProfileRepository
from roster.domain.user.repositories.user_repository import UserRepository

__all__ = ["ProfileRepository", "UserRepository"]
