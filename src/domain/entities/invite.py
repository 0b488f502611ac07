"""Invite domain entity."""

from dataclasses import dataclass
from typing import ClassVar

from src.domain.enums import Resource, Role


@dataclass(frozen=True, slots=True, kw_only=True)
class Invite:
    """A pending invitation to join an organization.

    Invites have an author, not an owner, so ownership conditions never hold
    for them.

    Attributes:
        id: Unique invite identifier.
        email: Invited email address.
        role: Role granted on acceptance.
        organization_id: Target organization.
        author_id: User who sent the invite.
    """

    kind: ClassVar[Resource] = Resource.INVITE

    id: str
    email: str | None = None
    role: Role = Role.MEMBER
    organization_id: str | None = None
    author_id: str | None = None
