"""Unit tests for authorization domain enums.

Tests for Role, Resource and Action enums and the action vocabulary.

Reference:
    - src/domain/enums/role.py
    - src/domain/enums/permission.py
"""

import pytest

from src.domain.enums import (
    ACTION_VOCABULARY,
    Action,
    Resource,
    Role,
    is_action_supported,
)


# =============================================================================
# Role Tests
# =============================================================================


class TestRole:
    """Tests for Role enum."""

    def test_all_roles_exist(self) -> None:
        """Test all expected roles are defined."""
        assert Role.ADMIN.value == "ADMIN"
        assert Role.MEMBER.value == "MEMBER"
        assert Role.BILLING.value == "BILLING"

    def test_role_count(self) -> None:
        """Test the role set is closed at three roles."""
        assert len(Role) == 3

    def test_role_is_string_enum(self) -> None:
        """Test roles compare equal to their stored string values."""
        assert Role.MEMBER == "MEMBER"
        assert isinstance(Role.ADMIN.value, str)

    def test_values(self) -> None:
        """Test values() lists every role."""
        assert Role.values() == ["ADMIN", "MEMBER", "BILLING"]

    def test_is_valid(self) -> None:
        """Test is_valid() accepts stored values only."""
        assert Role.is_valid("ADMIN") is True
        assert Role.is_valid(Role.BILLING) is True
        assert Role.is_valid("admin") is False
        assert Role.is_valid("OWNER") is False
        assert Role.is_valid(None) is False

    def test_invalid_role_raises_error(self) -> None:
        """Test invalid role value raises ValueError."""
        with pytest.raises(ValueError):
            Role("SUPERUSER")


# =============================================================================
# Resource Tests
# =============================================================================


class TestResource:
    """Tests for Resource enum."""

    def test_all_resources_exist(self) -> None:
        """Test all expected resources are defined."""
        assert Resource.USER.value == "User"
        assert Resource.PROJECT.value == "Project"
        assert Resource.ORGANIZATION.value == "Organization"
        assert Resource.INVITE.value == "Invite"
        assert Resource.BILLING.value == "Billing"
        assert Resource.ALL.value == "all"

    def test_resource_count(self) -> None:
        """Test five concrete kinds plus the wildcard."""
        assert len(Resource) == 6

    def test_resource_from_value(self) -> None:
        """Test creating resource from its name."""
        assert Resource("Project") == Resource.PROJECT


# =============================================================================
# Action Tests
# =============================================================================


class TestAction:
    """Tests for Action enum."""

    def test_all_actions_exist(self) -> None:
        """Test all expected actions are defined."""
        assert Action.values() == [
            "manage",
            "get",
            "create",
            "update",
            "delete",
            "transfer_ownership",
            "export",
        ]

    def test_invalid_action_raises_error(self) -> None:
        """Test an unknown action value raises ValueError."""
        with pytest.raises(ValueError):
            Action("teleport")


# =============================================================================
# Vocabulary Tests
# =============================================================================


class TestActionVocabulary:
    """Tests for the per-resource action vocabulary."""

    def test_every_resource_has_vocabulary(self) -> None:
        """Test each resource kind declares a vocabulary."""
        assert set(ACTION_VOCABULARY) == set(Resource)

    def test_manage_is_in_every_vocabulary(self) -> None:
        """Test the manage wildcard applies to every kind."""
        for actions in ACTION_VOCABULARY.values():
            assert Action.MANAGE in actions

    def test_wildcard_resource_only_supports_manage(self) -> None:
        """Test the all wildcard only pairs with manage."""
        assert ACTION_VOCABULARY[Resource.ALL] == frozenset({Action.MANAGE})

    @pytest.mark.parametrize(
        ("resource", "action", "expected"),
        [
            (Resource.USER, Action.DELETE, True),
            (Resource.USER, Action.CREATE, False),
            (Resource.PROJECT, Action.CREATE, True),
            (Resource.ORGANIZATION, Action.TRANSFER_OWNERSHIP, True),
            (Resource.ORGANIZATION, Action.GET, False),
            (Resource.INVITE, Action.UPDATE, False),
            (Resource.BILLING, Action.EXPORT, True),
            (Resource.BILLING, Action.DELETE, False),
        ],
    )
    def test_is_action_supported(
        self, resource: Resource, action: Action, expected: bool
    ) -> None:
        """Test vocabulary membership checks."""
        assert is_action_supported(resource, action) is expected
