"""Organization domain entity (tenant).

Users whose email domain matches ``domain`` may be attached automatically
when ``should_attach_users_by_domain`` is set.
"""

from dataclasses import dataclass
from typing import ClassVar

from src.domain.enums import Resource


@dataclass(frozen=True, slots=True, kw_only=True)
class Organization:
    """A tenant organization.

    Attributes:
        id: Unique organization identifier.
        owner_id: User who owns the organization.
        name: Organization name.
        slug: URL-safe unique slug.
        domain: Email domain used for automatic membership.
        should_attach_users_by_domain: Auto-attach users from ``domain``.
        avatar_url: Avatar image URL.
    """

    kind: ClassVar[Resource] = Resource.ORGANIZATION

    id: str
    owner_id: str | None = None
    name: str | None = None
    slug: str | None = None
    domain: str | None = None
    should_attach_users_by_domain: bool = False
    avatar_url: str | None = None
