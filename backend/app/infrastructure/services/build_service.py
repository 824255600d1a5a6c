"""
Build Service

Drives the build queue state machine. Builds are simulated: a processed
entry completes immediately and the project receives placeholder
download URLs.
"""

import logging
from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from app.domain import lifecycle
from app.domain.models import BuildStatus
from app.infrastructure.db.models.base import utcnow
from app.infrastructure.db.models.build_queue import BuildQueueEntry
from app.infrastructure.db.models.project import Project
from app.infrastructure.db.models.user import User
from app.infrastructure.db.repositories.build_queue_repository import BuildQueueRepository
from app.infrastructure.db.repositories.project_repository import ProjectRepository
from app.infrastructure.services.project_service import ProjectService


logger = logging.getLogger(__name__)


class BuildService:
    """Service for build status, queue inspection and build processing."""

    def __init__(self, session: AsyncSession):
        self._queue = BuildQueueRepository(session)
        self._projects = ProjectRepository(session)
        self._project_service = ProjectService(session)

    async def get_status(
        self,
        actor: User,
        project_id: int,
    ) -> Tuple[Project, Optional[BuildQueueEntry]]:
        """The project and its latest build entry, if any."""
        project = await self._project_service.get_for_actor(actor, project_id)
        build = await self._queue.latest_for_project(project_id)
        return project, build

    async def get_queue(self, limit: int = 50) -> List[BuildQueueEntry]:
        return await self._queue.recent(limit)

    async def pending_count(self) -> int:
        """Entries that are queued or processing."""
        queued = await self._queue.count_by_status(BuildStatus.QUEUED.value)
        processing = await self._queue.count_by_status(BuildStatus.PROCESSING.value)
        return queued + processing

    async def process_next(self) -> Optional[int]:
        """
        Run the next queued build to completion.

        Returns:
            The project id of the processed entry, or None when the
            queue is empty
        """
        entry = await self._queue.claim_next_queued()
        if entry is None:
            logger.info("[BUILDS] No builds in queue")
            return None

        project = await self._projects.get_by_id(entry.project_id)

        await self._queue.apply(entry, lifecycle.entry_processing(utcnow()))
        if project is not None:
            await self._projects.apply(project, lifecycle.project_building())
        logger.info(f"[BUILDS] Processing entry {entry.id} for project {entry.project_id}")

        finished_at = utcnow()
        await self._queue.apply(entry, lifecycle.entry_completed(finished_at))
        if project is not None:
            await self._projects.apply(
                project,
                lifecycle.project_completed(project.id, project.slug, finished_at),
            )
        else:
            logger.warning(
                f"[BUILDS] Project {entry.project_id} no longer exists; "
                f"entry {entry.id} completed without artifacts"
            )

        logger.info(f"[BUILDS] Completed entry {entry.id} for project {entry.project_id}")
        return entry.project_id

    async def simulate(self, actor: User, project_id: int) -> Project:
        """
        Force a project to the completed state, whatever its current one.

        The latest build entry, if there is one, is completed as well.
        """
        project = await self._project_service.get_for_actor(actor, project_id)
        finished_at = utcnow()

        project = await self._projects.apply(
            project,
            lifecycle.project_completed(
                project.id, project.slug, finished_at, include_web=True
            ),
        )

        build = await self._queue.latest_for_project(project_id)
        if build is not None:
            await self._queue.apply(build, lifecycle.entry_completed(finished_at))

        logger.info(f"[BUILDS] Simulated build for project {project_id} by user {actor.id}")
        return project
