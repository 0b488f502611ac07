"""Result types for railway-oriented programming.

Lets callers carry an authorization decision as a value they can pattern
match on, instead of branching on a bare bool or catching exceptions.

Usage:
    result = service.require(subject, Action.DELETE, project)
    match result:
        case Success():
            delete_project(project)
        case Failure(error=error):
            reject(error.required_permission)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
