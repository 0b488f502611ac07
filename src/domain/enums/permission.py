"""Permission components for authorization.

Defines the Resource and Action enums and the closed action vocabulary of
each resource kind. A permission is a (resource, action) pair such as
``Project:delete``.

Usage:
    from src.domain.enums import Action, Resource

    policy.can(Action.DELETE, Resource.PROJECT)
    policy.can("get", "User")
"""

from enum import Enum


class Resource(str, Enum):
    """Resource kinds the policy knows about.

    ``ALL`` is a wildcard that only appears inside rules; it is never the
    kind of a concrete resource.
    """

    USER = "User"
    PROJECT = "Project"
    ORGANIZATION = "Organization"
    INVITE = "Invite"
    BILLING = "Billing"

    ALL = "all"
    """Wildcard matching every resource kind (rules only)."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all resource values as strings.

        Returns:
            list[str]: List of resource values.
        """
        return [resource.value for resource in cls]


class Action(str, Enum):
    """Actions that can be performed on resources.

    ``MANAGE`` is a wildcard: a rule granting (or denying) ``manage`` covers
    every action in the target resource's vocabulary.
    """

    MANAGE = "manage"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    TRANSFER_OWNERSHIP = "transfer_ownership"
    EXPORT = "export"

    @classmethod
    def values(cls) -> list[str]:
        """Get all action values as strings.

        Returns:
            list[str]: List of action values.
        """
        return [action.value for action in cls]


ACTION_VOCABULARY: dict[Resource, frozenset[Action]] = {
    Resource.USER: frozenset(
        {Action.MANAGE, Action.GET, Action.UPDATE, Action.DELETE}
    ),
    Resource.PROJECT: frozenset(
        {Action.MANAGE, Action.GET, Action.CREATE, Action.UPDATE, Action.DELETE}
    ),
    Resource.ORGANIZATION: frozenset(
        {
            Action.MANAGE,
            Action.CREATE,
            Action.UPDATE,
            Action.DELETE,
            Action.TRANSFER_OWNERSHIP,
        }
    ),
    Resource.INVITE: frozenset(
        {Action.MANAGE, Action.GET, Action.CREATE, Action.DELETE}
    ),
    Resource.BILLING: frozenset({Action.MANAGE, Action.GET, Action.EXPORT}),
    Resource.ALL: frozenset({Action.MANAGE}),
}
"""Closed action vocabulary per resource kind."""


def is_action_supported(resource: Resource, action: Action) -> bool:
    """Check whether an action belongs to a resource's vocabulary.

    Args:
        resource: Resource kind.
        action: Action to check.

    Returns:
        bool: True if the action can ever apply to the resource.
    """
    return action in ACTION_VOCABULARY.get(resource, frozenset())
