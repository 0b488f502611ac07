"""Domain errors package.

Usage:
    from src.domain.errors import InvalidRuleError, UnknownRoleError
"""

from src.domain.errors.authorization_error import InvalidRuleError, UnknownRoleError

__all__ = [
    "InvalidRuleError",
    "UnknownRoleError",
]
