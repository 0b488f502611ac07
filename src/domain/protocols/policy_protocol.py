"""Policy protocol (port) for permission checks.

Request-handling code depends on this protocol, not on the evaluator that
implements it. A policy is bound to one subject and answers boolean
questions about it.

Usage:
    from src.domain.protocols.policy_protocol import PolicyProtocol

    def delete_project(policy: PolicyProtocol, project: Project) -> None:
        if policy.cannot(Action.DELETE, project):
            raise HTTPException(403, "Permission denied")
        ...
"""

from typing import Protocol

from src.domain.entities import ResourceEntity, Subject
from src.domain.enums import Action, Resource


class PolicyProtocol(Protocol):
    """Protocol for per-subject authorization policies.

    Error Handling:
        Evaluation never raises. Unknown actions, unknown resource kinds and
        malformed instances all resolve to a deny (fail-closed).
    """

    @property
    def subject(self) -> Subject:
        """Subject the policy was built for."""
        ...

    def can(
        self,
        action: Action | str,
        resource: Resource | str | ResourceEntity | None,
    ) -> bool:
        """Check if the subject may perform ``action`` on ``resource``.

        Args:
            action: Action enum or its string value.
            resource: Resource kind (enum or name) for a type-level check,
                or a resource entity for an instance-level check.

        Returns:
            bool: True if allowed, False if denied.
        """
        ...

    def cannot(
        self,
        action: Action | str,
        resource: Resource | str | ResourceEntity | None,
    ) -> bool:
        """Strict negation of ``can``.

        Args:
            action: Action enum or its string value.
            resource: Resource kind or resource entity.

        Returns:
            bool: True if denied, False if allowed.
        """
        ...
