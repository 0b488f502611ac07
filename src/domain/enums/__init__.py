"""Domain enums for authorization.

Available Enums:
    - Role: Membership roles (ADMIN, MEMBER, BILLING)
    - Resource: Protected resource kinds (plus the ``all`` wildcard)
    - Action: Actions on resources (plus the ``manage`` wildcard)
"""

from src.domain.enums.permission import (
    ACTION_VOCABULARY,
    Action,
    Resource,
    is_action_supported,
)
from src.domain.enums.role import Role

__all__ = [
    "ACTION_VOCABULARY",
    "Action",
    "Resource",
    "Role",
    "is_action_supported",
]
