"""
Project API Routes

Owner-scoped project CRUD, public landing lookups and download tracking.
"""

import logging
from typing import List

from fastapi import APIRouter
from pydantic import BaseModel

from app.api.dependencies import CurrentUser, SessionDep
from app.infrastructure.db.models.project import ProjectCreate, ProjectRead, ProjectUpdate
from app.infrastructure.services.project_service import ProjectService


logger = logging.getLogger(__name__)

router = APIRouter()


class ProjectCreated(BaseModel):
    """Identifiers of a newly created project."""
    id: int
    slug: str


class SuccessResponse(BaseModel):
    success: bool = True


# =============================================================================
# Owner Endpoints
# =============================================================================

@router.get("/projects", response_model=List[ProjectRead])
async def list_projects(user: CurrentUser, session: SessionDep):
    """The caller's projects, newest first (at most 50)."""
    return await ProjectService(session).list_for_user(user)


@router.get("/projects/slug/{slug}", response_model=ProjectRead)
async def get_project_by_slug(slug: str, session: SessionDep):
    """
    Public landing-page lookup.

    Returns 404 for unknown slugs and for projects whose landing page
    is disabled. Each call counts one view.
    """
    return await ProjectService(session).get_public(slug)


@router.get("/projects/{project_id}", response_model=ProjectRead)
async def get_project(project_id: int, user: CurrentUser, session: SessionDep):
    return await ProjectService(session).get_for_actor(user, project_id)


@router.post("/projects", response_model=ProjectCreated)
async def create_project(data: ProjectCreate, user: CurrentUser, session: SessionDep):
    """
    Create a project and queue its build.

    Returns 403 once the caller's plan limit is reached.
    """
    project = await ProjectService(session).create(user, data)
    return ProjectCreated(id=project.id, slug=project.slug)


@router.patch("/projects/{project_id}", response_model=SuccessResponse)
async def update_project(
    project_id: int,
    data: ProjectUpdate,
    user: CurrentUser,
    session: SessionDep,
):
    await ProjectService(session).update(user, project_id, data)
    return SuccessResponse()


@router.delete("/projects/{project_id}", response_model=SuccessResponse)
async def delete_project(project_id: int, user: CurrentUser, session: SessionDep):
    await ProjectService(session).delete(user, project_id)
    return SuccessResponse()


# =============================================================================
# Public Endpoints
# =============================================================================

@router.post("/projects/{project_id}/downloads", response_model=SuccessResponse)
async def track_download(project_id: int, session: SessionDep):
    """Count a download. Always succeeds, even for unknown ids."""
    await ProjectService(session).record_download(project_id)
    return SuccessResponse()
