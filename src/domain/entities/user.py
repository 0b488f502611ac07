"""User domain entity as an authorization resource."""

from dataclasses import dataclass
from typing import ClassVar

from src.domain.enums import Resource


@dataclass(frozen=True, slots=True, kw_only=True)
class User:
    """A platform user.

    Attributes:
        id: Unique user identifier.
        name: Display name.
        email: Email address.
        avatar_url: Avatar image URL.
    """

    kind: ClassVar[Resource] = Resource.USER

    id: str
    name: str | None = None
    email: str | None = None
    avatar_url: str | None = None
