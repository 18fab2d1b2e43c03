from roster.domain.role.aggregates.role import Role

__all__ = ["Role"]
