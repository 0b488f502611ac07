"""Common error values shared across layers.

Usage:
    from src.core.errors import AuthorizationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(AuthorizationError(
        code=ErrorCode.PERMISSION_DENIED,
        message="Permission denied",
        required_permission="Project:delete",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (no permission).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        required_permission: Permission that was required ("<resource>:<action>").
        details: Additional context.
    """

    required_permission: str | None = None
