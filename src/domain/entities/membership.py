"""Membership domain entity.

Links a user to an organization with exactly one role.
"""

from dataclasses import dataclass

from src.domain.enums import Role


@dataclass(frozen=True, slots=True, kw_only=True)
class Membership:
    """A user's membership in an organization.

    Attributes:
        user_id: Member user.
        organization_id: Organization joined.
        role: Role held in the organization.
    """

    user_id: str
    organization_id: str
    role: Role = Role.MEMBER
