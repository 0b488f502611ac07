"""Authorization factories.

Per-role rule sets and Casbin enforcers are app-scoped singletons built
lazily on first use (or eagerly by ``init_policies()`` at startup). Policies
are request-scoped: ``build_policy()`` binds a subject to its role's shared
enforcer.

Reference:
    - src/infrastructure/authorization/rule_table.py for the rule table
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.domain.entities import Subject
from src.domain.enums import Role
from src.domain.validators import validate_role

if TYPE_CHECKING:
    from casbin import Enforcer

    from src.domain.protocols.policy_protocol import PolicyProtocol
    from src.infrastructure.authorization.rules import RuleSet


# ============================================================================
# Authorization (rule sets + Casbin enforcers)
# ============================================================================


@lru_cache()
def get_rule_set(role: Role) -> "RuleSet":
    """Get the static rule set for a role (app-scoped).

    Args:
        role: Known role.

    Returns:
        Immutable RuleSet.
    """
    from src.infrastructure.authorization.rule_table import ROLE_RULES

    return ROLE_RULES[role]


@lru_cache()
def get_role_enforcer(role: Role) -> "Enforcer":
    """Get the compiled Casbin enforcer for a role (app-scoped).

    Compilation is idempotent, so a concurrent first call at worst builds
    an equivalent enforcer twice.

    Args:
        role: Known role.

    Returns:
        Read-only Casbin enforcer.
    """
    from src.core.container.infrastructure import get_logger
    from src.infrastructure.authorization.casbin_policy import compile_enforcer

    rule_set = get_rule_set(role)
    enforcer = compile_enforcer(rule_set)

    get_logger().debug(
        "policy_enforcer_compiled",
        role=role.value,
        policy_lines=len(rule_set.policy_lines()),
    )
    return enforcer


def init_policies() -> None:
    """Compile every role's enforcer at application startup.

    Optional: enforcers are otherwise compiled on first use.
    """
    from src.core.container.infrastructure import get_logger

    for role in Role:
        get_role_enforcer(role)

    get_logger().info(
        "policies_initialized",
        roles=Role.values(),
    )


def build_policy(subject: Subject) -> "PolicyProtocol":
    """Build the policy for an authenticated subject (request-scoped).

    Args:
        subject: Subject carrying at least a role. ``id`` is needed for any
            ownership condition to hold.

    Returns:
        Immutable policy implementing PolicyProtocol.

    Raises:
        UnknownRoleError: If ``subject.role`` is outside the closed role set.

    Usage:
        policy = build_policy(Subject(role=Role.MEMBER, id=user.id))
        if policy.cannot(Action.DELETE, project):
            raise HTTPException(403, "Permission denied")
    """
    from src.core.container.infrastructure import get_logger
    from src.infrastructure.authorization.casbin_policy import CasbinPolicy

    role = validate_role(subject.role)
    return CasbinPolicy(
        subject=subject,
        enforcer=get_role_enforcer(role),
        logger=get_logger(),
    )
