"""Pytest configuration.

This configuration ensures:
1. Settings load in the testing environment (JSON logs)
2. App-scoped caches are cleared between tests
3. Shared subjects and resources for authorization tests
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")

import pytest  # noqa: E402

from src.core.container import (  # noqa: E402
    get_authorization_service,
    get_logger,
    get_role_enforcer,
    get_rule_set,
)
from src.domain.entities import Organization, Project, Subject  # noqa: E402
from src.domain.enums import Role  # noqa: E402


@pytest.fixture(autouse=True)
def clear_container_caches():
    """Reset app-scoped singletons so tests never share container state."""
    yield
    get_authorization_service.cache_clear()
    get_role_enforcer.cache_clear()
    get_rule_set.cache_clear()
    get_logger.cache_clear()


# Test helper fixtures for authorization
@pytest.fixture
def user_id() -> str:
    """Standard test user ID."""
    return "user-id"


@pytest.fixture
def other_user_id() -> str:
    """A second user who owns nothing the first user owns."""
    return "another-user-id"


@pytest.fixture
def member(user_id: str) -> Subject:
    """MEMBER subject."""
    return Subject(role=Role.MEMBER, id=user_id)


@pytest.fixture
def admin(user_id: str) -> Subject:
    """ADMIN subject."""
    return Subject(role=Role.ADMIN, id=user_id)


@pytest.fixture
def billing(user_id: str) -> Subject:
    """BILLING subject."""
    return Subject(role=Role.BILLING, id=user_id)


@pytest.fixture
def own_project(user_id: str) -> Project:
    """Project owned by the standard test user."""
    return Project(id="project-id", owner_id=user_id, organization_id="org-id")


@pytest.fixture
def foreign_project(other_user_id: str) -> Project:
    """Project owned by another user."""
    return Project(id="other-project-id", owner_id=other_user_id, organization_id="org-id")


@pytest.fixture
def own_organization(user_id: str) -> Organization:
    """Organization owned by the standard test user."""
    return Organization(id="org-id", owner_id=user_id, slug="acme-inc")


@pytest.fixture
def foreign_organization(other_user_id: str) -> Organization:
    """Organization owned by another user."""
    return Organization(id="org-id", owner_id=other_user_id, slug="acme-inc")


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
