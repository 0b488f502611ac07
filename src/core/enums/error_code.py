"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention and travel inside
error values carried by Result types.

Categories:
- Authorization decisions (PERMISSION_*, UNKNOWN_ACTION, UNKNOWN_RESOURCE)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
    UNKNOWN_ACTION = "unknown_action"
    UNKNOWN_RESOURCE = "unknown_resource"
