"""Validators package exports."""

from src.domain.validators.functions import (
    RESOURCE_ENTITY_TYPES,
    resolve_action,
    resolve_resource,
    validate_role,
)

__all__ = [
    "RESOURCE_ENTITY_TYPES",
    "resolve_action",
    "resolve_resource",
    "validate_role",
]
