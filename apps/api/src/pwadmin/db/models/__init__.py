from pwadmin.db.models.organization import Organization
from pwadmin.db.models.organization_member import OrganizationMember
from pwadmin.db.models.user import User
from pwadmin.db.registry import ModelRegistry

__all__ = [
    "Organization",
    "OrganizationMember",
    "User",
    "build_registry",
]


def build_registry() -> ModelRegistry:
    """Register every entity and resolve their associations."""
    registry = ModelRegistry()
    registry.register(User)
    registry.register(Organization)
    registry.register(OrganizationMember)
    return registry.finalize()
