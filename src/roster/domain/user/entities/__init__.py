from roster.domain.user.entities.profile import Profile

__all__ = ["Profile"]
