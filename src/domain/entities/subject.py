"""Authorization subject (the authenticated actor).

A Subject is built per request from authenticated credentials and thrown
away when the request ends. ``role`` is accepted as a Role or a raw string
so that values read from storage can be checked by the policy builder,
which rejects anything outside the closed role set.

Usage:
    from src.domain.entities import Subject

    subject = Subject(role=Role.MEMBER, id=user.id)
    subject = Subject.from_membership(membership)
    anonymous = Subject(role=Role.MEMBER)
"""

from dataclasses import dataclass
from typing import Self

from src.domain.entities.membership import Membership
from src.domain.enums import Role


@dataclass(frozen=True, slots=True, kw_only=True)
class Subject:
    """Actor whose permissions are evaluated.

    Attributes:
        role: Role held at evaluation time.
        id: User identifier. None for anonymous, type-level evaluation;
            ownership conditions never hold without it.
    """

    role: Role | str
    id: str | None = None

    @classmethod
    def from_membership(cls, membership: Membership) -> Self:
        """Build a subject from an organization membership.

        Args:
            membership: Membership of the authenticated user.

        Returns:
            Subject carrying the membership's role and user id.
        """
        return cls(role=membership.role, id=membership.user_id)
