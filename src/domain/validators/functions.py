"""Centralized resolution of authorization inputs.

Request handlers pass roles, actions and resources as enums, raw strings or
entities. These pure functions map them onto the closed domain sets.

- ``validate_role`` raises (an unknown role is a configuration error)
- ``resolve_action`` / ``resolve_resource`` return None for anything
  unknown, so evaluation can fail closed
"""

from src.domain.entities import (
    Billing,
    Invite,
    Organization,
    Project,
    ResourceEntity,
    User,
)
from src.domain.enums import Action, Resource, Role
from src.domain.errors import UnknownRoleError

RESOURCE_ENTITY_TYPES: tuple[type, ...] = (User, Project, Organization, Invite, Billing)


def validate_role(role: object) -> Role:
    """Map a role value onto the closed role set.

    Args:
        role: Role enum or its stored string value.

    Returns:
        The matching Role.

    Raises:
        UnknownRoleError: If the value is not a known role.
    """
    if isinstance(role, Role):
        return role
    if Role.is_valid(role):
        return Role(role)
    raise UnknownRoleError(role)


def resolve_action(action: object) -> Action | None:
    """Resolve an action enum or string. Unknown actions resolve to None."""
    if isinstance(action, Action):
        return action
    if isinstance(action, str) and action in Action.values():
        return Action(action)
    return None


def resolve_resource(
    resource: object,
) -> tuple[Resource | None, ResourceEntity | None]:
    """Split a resource argument into (kind, instance).

    A bare kind (enum or name) gives a type-level check with no instance.
    An entity gives its declared kind plus the instance itself. The ``all``
    wildcard, unknown names and foreign objects resolve to no kind.

    Args:
        resource: Resource kind, kind name, or resource entity.

    Returns:
        tuple: (kind or None, instance or None).
    """
    if isinstance(resource, Resource):
        kind: Resource | None = resource
        instance = None
    elif isinstance(resource, str):
        kind = Resource(resource) if resource in Resource.values() else None
        instance = None
    elif isinstance(resource, RESOURCE_ENTITY_TYPES):
        kind = resource.kind
        instance = resource
    else:
        return None, None

    if kind is Resource.ALL:
        return None, None
    return kind, instance
