"""Project domain entity.

Projects belong to an organization and are owned by the user who created
them. Ownership drives the MEMBER role's update/delete rules.
"""

from dataclasses import dataclass
from typing import ClassVar

from src.domain.enums import Resource


@dataclass(frozen=True, slots=True, kw_only=True)
class Project:
    """A project inside an organization.

    Attributes:
        id: Unique project identifier.
        owner_id: User who owns the project.
        organization_id: Owning organization.
        name: Project name.
        slug: URL-safe unique slug.
        description: Free-form description.
        avatar_url: Avatar image URL.
    """

    kind: ClassVar[Resource] = Resource.PROJECT

    id: str
    owner_id: str | None = None
    organization_id: str | None = None
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    avatar_url: str | None = None
