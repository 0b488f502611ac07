"""Casbin implementation of PolicyProtocol.

Each role's RuleSet is compiled once into an in-memory ``casbin.Enforcer``
using ``model.conf``:
- Deny-override effect: any matching deny beats every matching allow
- ``all`` / ``manage`` wildcards handled by the matcher
- Conditions evaluated by ``conditionHolds`` against the bound subject

Enforcers are never mutated after compilation, so one enforcer per role can
be shared by every policy (and every thread) in the process.

Following hexagonal architecture:
- Infrastructure implements the domain protocol (PolicyProtocol)
- Domain doesn't know about Casbin
"""

import os
from typing import TYPE_CHECKING

import casbin

from src.domain.entities import ResourceEntity, Subject
from src.domain.enums import Action, Resource, is_action_supported
from src.domain.validators import resolve_action, resolve_resource
from src.infrastructure.authorization.conditions import condition_holds
from src.infrastructure.authorization.rules import RuleSet

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol


MODEL_PATH = os.path.join(os.path.dirname(__file__), "model.conf")

CONDITION_FUNCTION = "conditionHolds"


def compile_enforcer(rule_set: RuleSet) -> casbin.Enforcer:
    """Compile a role's rule set into a Casbin enforcer.

    Args:
        rule_set: Validated rule set.

    Returns:
        Enforcer holding one policy line per (rule, action).
    """
    enforcer = casbin.Enforcer(MODEL_PATH)
    enforcer.add_function(CONDITION_FUNCTION, condition_holds)
    for line in rule_set.policy_lines():
        enforcer.add_policy(*line)
    return enforcer


class CasbinPolicy:
    """Casbin-backed authorization policy bound to one subject.

    Implements PolicyProtocol. Evaluation is pure: it reads the shared
    enforcer and the bound subject and never writes to either.

    Attributes:
        _subject: Subject the policy answers for.
        _enforcer: Compiled, read-only enforcer for the subject's role.
        _logger: Optional logger, used only when the evaluator fails.
    """

    __slots__ = ("_subject", "_enforcer", "_logger")

    def __init__(
        self,
        subject: Subject,
        enforcer: casbin.Enforcer,
        logger: "LoggerProtocol | None" = None,
    ) -> None:
        """Initialize policy.

        Args:
            subject: Subject with a role already validated by the builder.
            enforcer: Compiled enforcer for the subject's role.
            logger: Optional structured logger.
        """
        self._subject = subject
        self._enforcer = enforcer
        self._logger = logger

    @property
    def subject(self) -> Subject:
        """Subject the policy was built for."""
        return self._subject

    def can(
        self,
        action: Action | str,
        resource: Resource | str | ResourceEntity | None,
    ) -> bool:
        """Check if the subject may perform ``action`` on ``resource``.

        Args:
            action: Action enum or its string value.
            resource: Resource kind (enum or name) or resource entity.

        Returns:
            bool: True if allowed. Unknown actions, unknown kinds, actions
            outside the kind's vocabulary and evaluator errors are denied.
        """
        resolved_action = resolve_action(action)
        kind, instance = resolve_resource(resource)
        if resolved_action is None or kind is None:
            return False
        if not is_action_supported(kind, resolved_action):
            return False

        try:
            allowed = self._enforcer.enforce(
                kind.value,
                resolved_action.value,
                self._subject,
                instance,
            )
        except Exception as e:
            # Fail closed on evaluator errors
            if self._logger is not None:
                self._logger.error(
                    "policy_evaluation_error",
                    error=e,
                    subject_id=self._subject.id,
                    resource=kind.value,
                    action=resolved_action.value,
                )
            return False
        return bool(allowed)

    def cannot(
        self,
        action: Action | str,
        resource: Resource | str | ResourceEntity | None,
    ) -> bool:
        """Strict negation of ``can``."""
        return not self.can(action, resource)

    def __repr__(self) -> str:
        return f"CasbinPolicy(role={self._subject.role!r}, subject_id={self._subject.id!r})"
