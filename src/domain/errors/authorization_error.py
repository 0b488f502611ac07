"""Authorization configuration errors.

These are raised, not returned. They signal a deployment or programming
inconsistency (a stored role the code does not know, a rule table that
grants an action its resource does not support), never an ordinary
permission decision. A denied permission is a plain ``False``.

Usage:
    from src.domain.errors import UnknownRoleError

    try:
        policy = build_policy(subject)
    except UnknownRoleError as e:
        logger.error("unknown_role", error=e, role=e.role)
        raise
"""


class UnknownRoleError(ValueError):
    """Raised when building a policy for a role outside the closed set."""

    def __init__(self, role: object) -> None:
        """Initialize unknown role error.

        Args:
            role: The offending role value.
        """
        self.role = role
        super().__init__(f"Unknown role: {role!r}")


class InvalidRuleError(ValueError):
    """Raised when a static rule violates its resource's action vocabulary."""

    def __init__(self, resource: str, action: str | None = None) -> None:
        """Initialize invalid rule error.

        Args:
            resource: Resource kind named by the rule.
            action: Action the resource does not support. None when the rule
                names no action at all.
        """
        self.resource = resource
        self.action = action
        if action is None:
            message = f"Rule for resource {resource!r} names no action"
        else:
            message = (
                f"Action {action!r} is not in the vocabulary of resource {resource!r}"
            )
        super().__init__(message)
