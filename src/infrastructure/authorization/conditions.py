"""Rule conditions over the subject and the resource instance.

Conditions are a closed set of named predicates. Casbin policy lines carry
the condition name and the model's matcher calls ``condition_holds`` (as
``conditionHolds``) to evaluate it.

Ownership predicates pattern-match over the resource variants that carry an
``owner_id``. They are False when no instance was supplied, when the
instance has no owner attribute, or when the subject is anonymous. They
never raise.
"""

from enum import Enum

from src.domain.entities import Organization, Project, Subject


class Condition(str, Enum):
    """Named rule conditions."""

    ALWAYS = "always"
    """Conditionless rule."""

    OWNED_BY_SUBJECT = "owned_by_subject"
    """``resource.owner_id == subject.id``."""

    NOT_OWNED_BY_SUBJECT = "not_owned_by_subject"
    """Instance has an owner, and it is not the subject."""


def _owner_of(resource: object) -> tuple[bool, str | None]:
    """Return (has_owner_attribute, owner_id) for a resource instance."""
    match resource:
        case Project(owner_id=owner_id) | Organization(owner_id=owner_id):
            return True, owner_id
        case _:
            return False, None


def condition_holds(condition: str, subject: Subject, resource: object) -> bool:
    """Evaluate a named condition.

    Args:
        condition: Condition name from a policy line.
        subject: Subject the policy is bound to.
        resource: Resource instance, or None for a type-level check.

    Returns:
        bool: True if the condition holds. Unknown condition names are False.
    """
    try:
        parsed = Condition(condition)
    except ValueError:
        return False

    if parsed is Condition.ALWAYS:
        return True

    has_owner, owner_id = _owner_of(resource)
    if not has_owner:
        return False

    subject_id = getattr(subject, "id", None)
    owned = subject_id is not None and owner_id == subject_id

    if parsed is Condition.OWNED_BY_SUBJECT:
        return owned
    return not owned
