"""
Authorization Policy

Role gates, project ownership and quota rules. Pure functions evaluated
in-process before each operation, independent of the HTTP layer.
"""

from enum import Enum
from typing import Optional, Protocol

from app.domain.models import UserRole
from app.domain.subscription import SubscriptionTier
from app.infrastructure.exceptions import AccessDeniedError, QuotaExceededError


class AccessLevel(str, Enum):
    """Procedure families, from least to most privileged."""
    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    ADMIN = "admin"
    SUPERADMIN = "superadmin"


ADMIN_ROLES = frozenset({UserRole.ADMIN.value, UserRole.SUPERADMIN.value})


class Actor(Protocol):
    id: Optional[int]
    role: str
    subscription_tier: str
    app_limit: int


def is_admin(role: Optional[str]) -> bool:
    return role in ADMIN_ROLES


def is_allowed(actor_role: Optional[str], required: AccessLevel) -> bool:
    """
    Decide whether an actor with ``actor_role`` may call a procedure.

    ``actor_role`` is None for anonymous callers.
    """
    if required == AccessLevel.PUBLIC:
        return True
    if actor_role is None:
        return False
    if required == AccessLevel.AUTHENTICATED:
        return True
    if required == AccessLevel.ADMIN:
        return is_admin(actor_role)
    return actor_role == UserRole.SUPERADMIN.value


def ensure_allowed(actor_role: Optional[str], required: AccessLevel) -> None:
    """Raise AccessDeniedError when ``is_allowed`` denies the call."""
    if is_allowed(actor_role, required):
        return
    if required == AccessLevel.SUPERADMIN:
        raise AccessDeniedError("Superadmin access required", required_role="superadmin")
    raise AccessDeniedError("Admin access required", required_role="admin")


def can_access_project(actor: Actor, project_user_id: int) -> bool:
    """Owners and admins may act on a project."""
    return actor.id == project_user_id or is_admin(actor.role)


def ensure_project_access(actor: Actor, project_user_id: int) -> None:
    if not can_access_project(actor, project_user_id):
        raise AccessDeniedError("Access denied")


def ensure_quota(actor: Actor, project_count: int) -> None:
    """
    Reject creation once the owned-project count reaches the app limit.

    The unlimited tier skips the count check entirely.
    """
    if actor.subscription_tier == SubscriptionTier.UNLIMITED.value:
        return
    if project_count >= actor.app_limit:
        raise QuotaExceededError(actor.app_limit)
