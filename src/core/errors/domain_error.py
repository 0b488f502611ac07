"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for error VALUES. A denied permission is an
expected outcome, so it flows through the application as data inside a
``Failure`` rather than as a raised exception.

Architecture:
- Does NOT inherit from Exception (returned in Result, never raised)
- Uses dataclass inheritance
- Configuration/programming errors (unknown role, invalid rule table) are
  real exceptions and live in src.domain.errors instead

Usage:
    from src.core.errors import DomainError
    from src.core.enums import ErrorCode

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
