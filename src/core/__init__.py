"""Core shared kernel.

Foundational utilities used across all layers:
- Result types for railway-oriented programming
- Error values carried inside Result types
- Settings

The core module has NO dependencies on other application layers.
"""

from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, DomainError
from src.core.result import Failure, Result, Success

__all__ = [
    "AuthorizationError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
]
