"""Domain entities for authorization.

Pure dataclasses with no framework dependencies. Every resource entity
declares its kind through a ``kind`` class attribute, which makes the
entities a tagged union the policy can discriminate on.
"""

from src.domain.entities.billing import Billing
from src.domain.entities.invite import Invite
from src.domain.entities.membership import Membership
from src.domain.entities.organization import Organization
from src.domain.entities.project import Project
from src.domain.entities.subject import Subject
from src.domain.entities.user import User

type ResourceEntity = User | Project | Organization | Invite | Billing

__all__ = [
    "Billing",
    "Invite",
    "Membership",
    "Organization",
    "Project",
    "ResourceEntity",
    "Subject",
    "User",
]
