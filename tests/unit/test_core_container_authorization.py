"""Unit tests for authorization container factories.

Tests cover:
- build_policy() for every role and for unknown roles
- App-scoped caching of rule sets and enforcers
- init_policies() warm-up

Reference:
    - src/core/container/authorization.py
"""

from unittest.mock import MagicMock, patch

import pytest

from src.core.container import (
    build_policy,
    get_role_enforcer,
    get_rule_set,
    init_policies,
)
from src.domain.entities import Project, Subject
from src.domain.enums import Role
from src.domain.errors import UnknownRoleError
from src.infrastructure.authorization.casbin_policy import CasbinPolicy
from src.infrastructure.authorization.rule_table import ROLE_RULES


@pytest.mark.unit
class TestBuildPolicy:
    """Tests for build_policy()."""

    @pytest.mark.parametrize("role", list(Role))
    def test_builds_for_every_role(self, role: Role) -> None:
        """Test every role in the closed set yields a policy."""
        policy = build_policy(Subject(role=role))

        assert isinstance(policy, CasbinPolicy)
        assert policy.cannot("teleport", "Project") is True

    @pytest.mark.parametrize("role", ["ADMIN", "MEMBER", "BILLING"])
    def test_accepts_stored_role_strings(self, role: str) -> None:
        """Test raw role strings from storage are accepted."""
        assert build_policy(Subject(role=role, id="u1")).subject.role == role

    @pytest.mark.parametrize("role", ["OWNER", "admin", "", "GUEST"])
    def test_unknown_role_raises(self, role: str) -> None:
        """Test roles outside the closed set fail with UnknownRoleError."""
        with pytest.raises(UnknownRoleError) as exc_info:
            build_policy(Subject(role=role, id="u1"))

        assert exc_info.value.role == role

    def test_policy_binds_subject_id(self, own_project: Project) -> None:
        """Test ownership conditions compare against the bound subject."""
        owner = build_policy(Subject(role=Role.MEMBER, id="user-id"))
        stranger = build_policy(Subject(role=Role.MEMBER, id="u2"))

        assert owner.can("delete", own_project) is True
        assert stranger.can("delete", own_project) is False

    def test_policies_share_role_enforcer(self) -> None:
        """Test subjects with the same role share one compiled enforcer."""
        first = build_policy(Subject(role=Role.MEMBER, id="u1"))
        second = build_policy(Subject(role="MEMBER", id="u2"))

        assert first._enforcer is second._enforcer  # type: ignore[attr-defined]


@pytest.mark.unit
class TestRoleCaches:
    """Tests for app-scoped rule set and enforcer caches."""

    def test_get_rule_set_returns_table_entry(self) -> None:
        """Test rule sets come from the static table."""
        for role in Role:
            assert get_rule_set(role) is ROLE_RULES[role]

    def test_get_role_enforcer_is_cached(self) -> None:
        """Test enforcers are compiled once per role."""
        with patch(
            "src.infrastructure.authorization.casbin_policy.compile_enforcer"
        ) as mock_compile:
            mock_compile.side_effect = lambda rule_set: MagicMock(name=rule_set.role.value)

            first = get_role_enforcer(Role.ADMIN)
            second = get_role_enforcer(Role.ADMIN)
            other = get_role_enforcer(Role.BILLING)

        assert first is second
        assert first is not other
        assert mock_compile.call_count == 2

    def test_init_policies_compiles_every_role(self) -> None:
        """Test init_policies() warms the cache for every role."""
        init_policies()

        assert get_role_enforcer.cache_info().currsize == len(Role)

    def test_init_policies_logs(self) -> None:
        """Test init_policies() logs the warmed roles."""
        mock_logger = MagicMock()
        with patch(
            "src.core.container.infrastructure.get_logger", return_value=mock_logger
        ):
            init_policies()

        mock_logger.info.assert_called_once_with(
            "policies_initialized", roles=["ADMIN", "MEMBER", "BILLING"]
        )
