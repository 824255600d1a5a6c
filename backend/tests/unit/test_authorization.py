"""
Unit tests for the authorization policy.

Covers role gates, project ownership and the app quota.
"""

from dataclasses import dataclass
from typing import Optional

import pytest

from app.domain.authorization import (
    AccessLevel,
    can_access_project,
    ensure_allowed,
    ensure_project_access,
    ensure_quota,
    is_allowed,
)
from app.infrastructure.exceptions import AccessDeniedError, QuotaExceededError


@dataclass
class FakeActor:
    id: Optional[int] = 1
    role: str = "user"
    subscription_tier: str = "free"
    app_limit: int = 1


class TestRoleGates:
    """is_allowed / ensure_allowed over every role and access level."""

    @pytest.mark.parametrize(
        "role,level,expected",
        [
            (None, AccessLevel.PUBLIC, True),
            (None, AccessLevel.AUTHENTICATED, False),
            (None, AccessLevel.ADMIN, False),
            ("user", AccessLevel.PUBLIC, True),
            ("user", AccessLevel.AUTHENTICATED, True),
            ("user", AccessLevel.ADMIN, False),
            ("user", AccessLevel.SUPERADMIN, False),
            ("admin", AccessLevel.ADMIN, True),
            ("admin", AccessLevel.SUPERADMIN, False),
            ("superadmin", AccessLevel.ADMIN, True),
            ("superadmin", AccessLevel.SUPERADMIN, True),
        ],
    )
    def test_is_allowed(self, role, level, expected):
        assert is_allowed(role, level) is expected

    def test_admin_gate_message(self):
        with pytest.raises(AccessDeniedError, match="Admin access required"):
            ensure_allowed("user", AccessLevel.ADMIN)

    def test_superadmin_gate_message(self):
        with pytest.raises(AccessDeniedError, match="Superadmin access required"):
            ensure_allowed("admin", AccessLevel.SUPERADMIN)

    def test_allowed_call_passes(self):
        ensure_allowed("superadmin", AccessLevel.SUPERADMIN)


class TestOwnership:
    """Owners and admins may act on a project, nobody else."""

    def test_owner_allowed(self):
        assert can_access_project(FakeActor(id=5), project_user_id=5)

    def test_other_user_denied(self):
        assert not can_access_project(FakeActor(id=5), project_user_id=6)
        with pytest.raises(AccessDeniedError, match="Access denied"):
            ensure_project_access(FakeActor(id=5), 6)

    @pytest.mark.parametrize("role", ["admin", "superadmin"])
    def test_admins_allowed_on_any_project(self, role):
        assert can_access_project(FakeActor(id=5, role=role), project_user_id=99)


class TestQuota:
    """App limit enforcement."""

    def test_below_limit_passes(self):
        ensure_quota(FakeActor(app_limit=3), project_count=2)

    def test_at_limit_rejected_with_limit_in_message(self):
        with pytest.raises(QuotaExceededError) as exc_info:
            ensure_quota(FakeActor(app_limit=1), project_count=1)

        assert exc_info.value.message == (
            "App limit reached. You can create up to 1 apps with your current plan."
        )
        assert exc_info.value.details == {"limit": 1}

    def test_unlimited_tier_ignores_count(self):
        ensure_quota(
            FakeActor(subscription_tier="unlimited", app_limit=1),
            project_count=50,
        )

    def test_zero_limit_blocks_first_project(self):
        with pytest.raises(QuotaExceededError):
            ensure_quota(FakeActor(app_limit=0), project_count=0)
