"""Declarative rule records and per-role rule sets.

A Rule is an immutable (effect, actions, resource, condition) record. A
RuleSet is the ordered, validated tuple of rules for one role.

Usage:
    rules = RuleSet(
        role=Role.MEMBER,
        rules=(
            allow(Action.GET, Resource.USER),
            allow({Action.UPDATE, Action.DELETE}, Resource.PROJECT,
                  when=Condition.OWNED_BY_SUBJECT),
        ),
    )
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from src.domain.enums import ACTION_VOCABULARY, Action, Resource, Role
from src.domain.errors import InvalidRuleError
from src.infrastructure.authorization.conditions import Condition


class Effect(str, Enum):
    """Rule effect. Values match Casbin's ``p.eft`` convention."""

    ALLOW = "allow"
    DENY = "deny"


@dataclass(frozen=True, slots=True, kw_only=True)
class Rule:
    """Single authorization rule.

    Attributes:
        effect: Allow or deny.
        actions: Actions covered (``manage`` covers the whole vocabulary).
        resource: Resource kind (``all`` covers every kind).
        condition: Predicate over subject and instance.
    """

    effect: Effect
    actions: frozenset[Action]
    resource: Resource
    condition: Condition = Condition.ALWAYS

    def policy_lines(self) -> Iterator[tuple[str, str, str, str]]:
        """Expand into Casbin policy lines, one per action.

        Yields:
            (obj, act, cond, eft) tuples.
        """
        for action in sorted(self.actions, key=lambda a: a.value):
            yield (
                self.resource.value,
                action.value,
                self.condition.value,
                self.effect.value,
            )


def _as_actions(actions: Action | Iterable[Action]) -> frozenset[Action]:
    if isinstance(actions, Action):
        return frozenset({actions})
    return frozenset(actions)


def allow(
    actions: Action | Iterable[Action],
    resource: Resource,
    *,
    when: Condition = Condition.ALWAYS,
) -> Rule:
    """Build an allow rule."""
    return Rule(
        effect=Effect.ALLOW,
        actions=_as_actions(actions),
        resource=resource,
        condition=when,
    )


def deny(
    actions: Action | Iterable[Action],
    resource: Resource,
    *,
    when: Condition = Condition.ALWAYS,
) -> Rule:
    """Build a deny rule."""
    return Rule(
        effect=Effect.DENY,
        actions=_as_actions(actions),
        resource=resource,
        condition=when,
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class RuleSet:
    """Immutable, validated rule set for one role.

    Attributes:
        role: Role the rules apply to.
        rules: Ordered rules.

    Raises:
        InvalidRuleError: If a rule has no actions or names an action outside
            its resource's vocabulary.
    """

    role: Role
    rules: tuple[Rule, ...]

    def __post_init__(self) -> None:
        for rule in self.rules:
            if not rule.actions:
                raise InvalidRuleError(rule.resource.value)
            vocabulary = ACTION_VOCABULARY[rule.resource]
            for action in rule.actions:
                if action not in vocabulary:
                    raise InvalidRuleError(rule.resource.value, action.value)

    def policy_lines(self) -> list[tuple[str, str, str, str]]:
        """All Casbin policy lines for this role, in rule order.

        Returns:
            list of (obj, act, cond, eft) tuples.
        """
        return [line for rule in self.rules for line in rule.policy_lines()]

    def permissions(self) -> list[tuple[str, str]]:
        """Direct (resource, action) grants, ignoring conditions and denies.

        Useful for admin UIs listing what a role can do at most.

        Returns:
            list[tuple[str, str]]: Deduplicated pairs in rule order.
        """
        seen: list[tuple[str, str]] = []
        for obj, act, _cond, eft in self.policy_lines():
            if eft == Effect.ALLOW.value and (obj, act) not in seen:
                seen.append((obj, act))
        return seen
