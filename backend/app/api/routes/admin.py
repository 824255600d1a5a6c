"""
Admin API Routes

Dashboard statistics and cross-user listings for admins, user
management for superadmins.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel

from app.api.dependencies import AdminUser, SessionDep, SuperadminUser
from app.domain.models import ProjectStatus
from app.infrastructure.db.models.activity_log import ActivityLogRead
from app.infrastructure.db.models.build_queue import BuildQueueRead
from app.infrastructure.db.models.project import ProjectRead
from app.infrastructure.db.models.user import UserRead, UserUpdate
from app.infrastructure.services.activity_service import ActivityService
from app.infrastructure.services.admin_service import AdminService
from app.infrastructure.services.build_service import BuildService


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin")


class SystemStats(BaseModel):
    """Row counts shown on the admin dashboard."""
    users: int
    projects: int
    builds: int
    templates: int
    pending_builds: int


class SuccessResponse(BaseModel):
    success: bool = True


# =============================================================================
# Dashboard
# =============================================================================

@router.get("/stats", response_model=SystemStats)
async def get_stats(admin: AdminUser, session: SessionDep):
    return SystemStats(**await AdminService(session).get_stats())


@router.get("/recent-projects", response_model=List[ProjectRead])
async def get_recent_projects(admin: AdminUser, session: SessionDep):
    """The 10 most recently created projects."""
    return await AdminService(session).recent_projects()


@router.get("/build-queue", response_model=List[BuildQueueRead])
async def get_build_queue(admin: AdminUser, session: SessionDep):
    return await BuildService(session).get_queue()


# =============================================================================
# Listings
# =============================================================================

@router.get("/users", response_model=List[UserRead])
async def get_users(
    admin: AdminUser,
    session: SessionDep,
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
):
    return await AdminService(session).list_users(limit=limit, offset=offset)


@router.get("/projects", response_model=List[ProjectRead])
async def get_projects(
    admin: AdminUser,
    session: SessionDep,
    status: Optional[ProjectStatus] = None,
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
):
    """All projects newest first, optionally filtered by status."""
    return await AdminService(session).list_projects(
        status=status.value if status else None,
        limit=limit,
        offset=offset,
    )


@router.get("/logs", response_model=List[ActivityLogRead])
async def get_logs(
    admin: AdminUser,
    session: SessionDep,
    user_id: Optional[int] = None,
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
):
    """Activity log newest first, optionally for a single user."""
    return await ActivityService(session).list_logs(
        user_id=user_id, limit=limit, offset=offset
    )


# =============================================================================
# User Management
# =============================================================================

@router.patch("/users/{user_id}", response_model=SuccessResponse)
async def update_user(
    user_id: int,
    data: UserUpdate,
    superadmin: SuperadminUser,
    session: SessionDep,
):
    """Change a user's role, tier, app limit or active flag (superadmin only)."""
    await AdminService(session).update_user(superadmin, user_id, data)
    return SuccessResponse()
