"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import build_policy, get_logger

The container is organized into modules by concern:
- infrastructure: Core services (logging)
- authorization: Rule sets, Casbin enforcers and policy construction
- services: Application services
"""

# Infrastructure services
from src.core.container.infrastructure import get_logger

# Authorization
from src.core.container.authorization import (
    build_policy,
    get_role_enforcer,
    get_rule_set,
    init_policies,
)

# Application services
from src.core.container.services import get_authorization_service

__all__ = [
    # Infrastructure
    "get_logger",
    # Authorization
    "build_policy",
    "get_role_enforcer",
    "get_rule_set",
    "init_policies",
    # Services
    "get_authorization_service",
]
