"""
Admin Service

System statistics, cross-user listings and user management for the
admin dashboard.
"""

import logging
from typing import Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.models import ActivityAction
from app.infrastructure.db.models.project import Project
from app.infrastructure.db.models.user import User, UserUpdate
from app.infrastructure.db.repositories.build_queue_repository import BuildQueueRepository
from app.infrastructure.db.repositories.project_repository import ProjectRepository
from app.infrastructure.db.repositories.template_repository import TemplateRepository
from app.infrastructure.db.repositories.user_repository import UserRepository
from app.infrastructure.exceptions import NotFoundError
from app.infrastructure.services.activity_service import ActivityService
from app.infrastructure.services.build_service import BuildService


logger = logging.getLogger(__name__)


class AdminService:
    """Read-mostly service behind the admin routes."""

    def __init__(self, session: AsyncSession):
        self._users = UserRepository(session)
        self._projects = ProjectRepository(session)
        self._templates = TemplateRepository(session)
        self._queue = BuildQueueRepository(session)
        self._builds = BuildService(session)
        self._activity = ActivityService(session)

    async def get_stats(self) -> Dict[str, int]:
        """Table counts plus builds still queued or processing."""
        return {
            "users": await self._users.count(),
            "projects": await self._projects.count(),
            "builds": await self._queue.count(),
            "templates": await self._templates.count(),
            "pending_builds": await self._builds.pending_count(),
        }

    async def list_users(self, limit: int = 100, offset: int = 0) -> List[User]:
        return await self._users.list_users(limit=limit, offset=offset)

    async def list_projects(
        self,
        status: Optional[str] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> List[Project]:
        return await self._projects.list_all(status=status, limit=limit, offset=offset)

    async def recent_projects(self, limit: int = 10) -> List[Project]:
        return await self._projects.recent(limit)

    async def update_user(self, actor: User, user_id: int, data: UserUpdate) -> User:
        """
        Change a user's role, tier, limit or active flag.

        Raises:
            NotFoundError: Unknown user id
        """
        values = data.model_dump(exclude_unset=True, exclude_none=True, mode="json")
        user = await self._users.update(user_id, values)
        if user is None:
            raise NotFoundError("User not found", operation="update", table="users")

        await self._activity.log(
            actor.id,
            ActivityAction.USER_UPDATED,
            entity_type="user",
            entity_id=user_id,
            details=values,
        )

        logger.info(f"[ADMIN] User {actor.id} updated user {user_id}: {sorted(values)}")
        return user
