"""
Build API Routes

Build status for project owners and queue processing for admins.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter
from pydantic import BaseModel

from app.api.dependencies import AdminUser, CurrentUser, SessionDep
from app.infrastructure.db.models.build_queue import BuildQueueRead
from app.infrastructure.db.models.project import ProjectRead
from app.infrastructure.services.build_service import BuildService


logger = logging.getLogger(__name__)

router = APIRouter()


class BuildStatusResponse(BaseModel):
    """A project with its latest build entry."""
    project: ProjectRead
    build: Optional[BuildQueueRead] = None


class ProcessNextResponse(BaseModel):
    """Outcome of one queue step."""
    success: bool
    project_id: Optional[int] = None
    message: Optional[str] = None


class SimulateResponse(BaseModel):
    success: bool = True


# =============================================================================
# Admin Queue Endpoints
# =============================================================================

@router.get("/builds/queue", response_model=List[BuildQueueRead])
async def get_queue(admin: AdminUser, session: SessionDep):
    """The 50 most recent build entries."""
    return await BuildService(session).get_queue()


@router.post(
    "/builds/process-next",
    response_model=ProcessNextResponse,
    response_model_exclude_none=True,
)
async def process_next(admin: AdminUser, session: SessionDep):
    """
    Run the highest-priority queued build to completion.

    Returns ``success: false`` when nothing is queued.
    """
    project_id = await BuildService(session).process_next()
    if project_id is None:
        return ProcessNextResponse(success=False, message="No builds in queue")
    return ProcessNextResponse(success=True, project_id=project_id)


# =============================================================================
# Owner Endpoints
# =============================================================================

@router.get("/builds/{project_id}/status", response_model=BuildStatusResponse)
async def get_build_status(project_id: int, user: CurrentUser, session: SessionDep):
    project, build = await BuildService(session).get_status(user, project_id)
    return BuildStatusResponse(
        project=ProjectRead.model_validate(project, from_attributes=True),
        build=BuildQueueRead.model_validate(build, from_attributes=True) if build else None,
    )


@router.post("/builds/{project_id}/simulate", response_model=SimulateResponse)
async def simulate_build(project_id: int, user: CurrentUser, session: SessionDep):
    """Mark the project's build completed without queue processing."""
    await BuildService(session).simulate(user, project_id)
    return SimulateResponse()
