"""Authorization demo entry point.

Builds the policy of a MEMBER subject and logs a few decisions, including
one type-level denial, one ownership-based allow and one ownership-based
denial.

Usage:
    python -m src.main
"""

from src.core.config import settings
from src.core.container import (
    build_policy,
    get_authorization_service,
    get_logger,
    init_policies,
)
from src.domain.entities import Membership, Project, Subject
from src.domain.enums import Action, Resource, Role


def main() -> None:
    """Run the demo."""
    logger = get_logger()
    if settings.preload_policies:
        init_policies()

    membership = Membership(
        user_id="user-id",
        organization_id="organization-id",
        role=Role.MEMBER,
    )
    subject = Subject.from_membership(membership)
    policy = build_policy(subject)

    logger.info(
        "member_abilities",
        role=Role.MEMBER.value,
        invite_user=policy.can("invite", "User"),
        delete_user=policy.can(Action.DELETE, Resource.USER),
        cannot_delete_user=policy.cannot(Action.DELETE, Resource.USER),
    )

    service = get_authorization_service()
    own_project = Project(id="project-id", owner_id=subject.id)
    other_project = Project(id="other-project-id", owner_id="another-user-id")
    service.check(subject, Action.DELETE, own_project)
    service.check(subject, Action.DELETE, other_project)


if __name__ == "__main__":
    main()
