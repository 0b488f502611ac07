"""Membership roles for authorization.

A user holds exactly one role inside an organization (the ``role`` column of
a membership). The role selects which static rule set a policy is built from.

Roles:
    - ADMIN: manages everything in the organization, except updating or
      transferring an organization someone else owns
    - MEMBER: reads users, reads and creates projects, edits and deletes
      only the projects they own
    - BILLING: manages billing only

Usage:
    from src.domain.enums import Role

    if Role.is_valid(raw_role):
        subject = Subject(role=Role(raw_role), id=user_id)
"""

from enum import Enum


class Role(str, Enum):
    """Closed set of membership roles.

    String Enum:
        Inherits from str so values round-trip through storage and JSON
        unchanged. Values are upper-case to match the stored column values.
    """

    ADMIN = "ADMIN"
    """Organization administrator."""

    MEMBER = "MEMBER"
    """Regular organization member."""

    BILLING = "BILLING"
    """Billing contact with access to billing only."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: List of role values ['ADMIN', 'MEMBER', 'BILLING'].
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: object) -> bool:
        """Check if a value names a known role.

        Args:
            value: Role or string to check.

        Returns:
            bool: True if value is a valid role.
        """
        return value in cls.values()
