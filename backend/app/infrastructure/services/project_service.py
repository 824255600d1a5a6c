"""
Project Service

Project lifecycle: ownership-checked reads and edits, public landing
lookups, and quota-checked creation that enqueues the first build.
"""

import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.config.settings import settings
from app.domain.authorization import ensure_project_access, ensure_quota
from app.domain.lifecycle import build_priority, generate_slug, package_name_for
from app.domain.models import (
    ActivityAction,
    BuildStatus,
    ProjectStatus,
    DEFAULT_PRIMARY_COLOR,
    DEFAULT_SECONDARY_COLOR,
)
from app.infrastructure.db.models.build_queue import BuildQueueEntry
from app.infrastructure.db.models.project import Project, ProjectCreate, ProjectUpdate
from app.infrastructure.db.models.user import User
from app.infrastructure.db.repositories.build_queue_repository import BuildQueueRepository
from app.infrastructure.db.repositories.project_repository import ProjectRepository
from app.infrastructure.db.repositories.template_repository import TemplateRepository
from app.infrastructure.db.repositories.user_repository import UserRepository
from app.infrastructure.exceptions import NotFoundError, QuotaExceededError
from app.infrastructure.services.activity_service import ActivityService


logger = logging.getLogger(__name__)


PROJECT_NOT_FOUND = "Project not found"


class ProjectService:
    """
    Service for project operations.

    All writes go through the caller's session, so a multi-step operation
    commits or rolls back as one unit with the request.
    """

    def __init__(self, session: AsyncSession):
        self._projects = ProjectRepository(session)
        self._templates = TemplateRepository(session)
        self._queue = BuildQueueRepository(session)
        self._users = UserRepository(session)
        self._activity = ActivityService(session)

    # =========================================================================
    # Reads
    # =========================================================================

    async def get_for_actor(self, actor: User, project_id: int) -> Project:
        """
        Load a project the actor owns, or any project for admins.

        Raises:
            NotFoundError: Unknown project id
            AccessDeniedError: Not owner and not admin
        """
        project = await self._projects.get_by_id(project_id)
        if project is None:
            raise NotFoundError(PROJECT_NOT_FOUND, operation="get", table="projects")
        ensure_project_access(actor, project.user_id)
        return project

    async def list_for_user(self, actor: User) -> List[Project]:
        return await self._projects.list_by_user(actor.id)

    async def get_public(self, slug: str) -> Project:
        """
        Landing-page lookup. Counts one view per call.

        Unknown slugs and disabled landing pages are indistinguishable.
        """
        project = await self._projects.get_by_slug(slug)
        if project is None or not project.landing_page_enabled:
            raise NotFoundError(PROJECT_NOT_FOUND, operation="get_by_slug", table="projects")

        await self._projects.increment_views(project.id)
        await self._projects.session.refresh(project)
        return project

    # =========================================================================
    # Commands
    # =========================================================================

    async def create(self, actor: User, data: ProjectCreate) -> Project:
        """
        Create a project and enqueue its first build.

        Steps: quota check, slug, template defaults, project insert,
        build entry, creation counter, activity entry.

        Raises:
            QuotaExceededError: Owned projects already at the plan limit
        """
        # Lock the user row so concurrent creations count sequentially
        user = await self._users.get_for_update(actor.id) or actor
        project_count = await self._projects.count_by_user(user.id)
        try:
            ensure_quota(user, project_count)
        except QuotaExceededError:
            logger.info(
                f"[PROJECTS] Quota reached for user {user.id}: "
                f"{project_count}/{user.app_limit} ({user.subscription_tier})"
            )
            raise

        slug = generate_slug(data.name)

        template = None
        if data.template_id:
            template = await self._templates.get_by_id(data.template_id)
            if template is not None:
                await self._templates.increment_usage(template.id)

        features = data.features
        if features is None:
            features = (template.features if template else None) or []

        project = Project(
            user_id=user.id,
            name=data.name,
            slug=slug,
            description=data.description or (template.description if template else None),
            prompt=data.prompt or (template.default_prompt if template else None),
            app_type=data.app_type.value,
            template_id=data.template_id,
            primary_color=(
                data.primary_color
                or (template.primary_color if template else None)
                or DEFAULT_PRIMARY_COLOR
            ),
            secondary_color=(
                data.secondary_color
                or (template.secondary_color if template else None)
                or DEFAULT_SECONDARY_COLOR
            ),
            features=features,
            status=ProjectStatus.PENDING.value,
            build_progress=0,
            package_name=package_name_for(slug),
        )
        project = await self._projects.add(project)

        await self._queue.add(
            BuildQueueEntry(
                project_id=project.id,
                user_id=user.id,
                priority=build_priority(user.subscription_tier),
                status=BuildStatus.QUEUED.value,
                estimated_time=settings.default_build_estimate_seconds,
            )
        )

        await self._users.increment_apps_created(user.id)

        await self._activity.log(
            user.id,
            ActivityAction.PROJECT_CREATED,
            entity_type="project",
            entity_id=project.id,
            details={"name": data.name, "app_type": data.app_type.value},
        )

        logger.info(f"[PROJECTS] User {user.id} created project {project.id} ({slug})")
        return project

    async def update(self, actor: User, project_id: int, data: ProjectUpdate) -> Project:
        project = await self.get_for_actor(actor, project_id)
        project = await self._projects.apply(project, data.model_dump(exclude_unset=True))

        await self._activity.log(
            actor.id,
            ActivityAction.PROJECT_UPDATED,
            entity_type="project",
            entity_id=project_id,
        )
        return project

    async def delete(self, actor: User, project_id: int) -> None:
        """Delete a project. Its build entries are kept as history."""
        await self.get_for_actor(actor, project_id)
        await self._projects.delete(project_id)

        await self._activity.log(
            actor.id,
            ActivityAction.PROJECT_DELETED,
            entity_type="project",
            entity_id=project_id,
        )
        logger.info(f"[PROJECTS] User {actor.id} deleted project {project_id}")

    async def record_download(self, project_id: int) -> None:
        """Count a download. Unknown ids are ignored."""
        await self._projects.increment_downloads(project_id)
