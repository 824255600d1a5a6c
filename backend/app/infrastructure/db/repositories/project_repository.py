"""
Project Repository

Extends BaseRepository with project-specific queries.
"""

from typing import List, Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.db.models.project import Project
from app.infrastructure.db.repositories.base_repository import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for generated-app projects."""

    def __init__(self, session: AsyncSession):
        super().__init__(Project, session)

    async def get_by_slug(self, slug: str) -> Optional[Project]:
        stmt = select(Project).where(Project.slug == slug)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_user(self, user_id: int, limit: int = 50) -> List[Project]:
        """Projects owned by a user, newest first."""
        stmt = (
            select(Project)
            .where(Project.user_id == user_id)
            .order_by(Project.created_at.desc(), Project.id.desc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def count_by_user(self, user_id: int) -> int:
        stmt = (
            select(func.count())
            .select_from(Project)
            .where(Project.user_id == user_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def list_all(
        self,
        status: Optional[str] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> List[Project]:
        """All projects newest first, optionally filtered by status."""
        stmt = select(Project)
        if status:
            stmt = stmt.where(Project.status == status)
        stmt = (
            stmt.order_by(Project.created_at.desc(), Project.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def recent(self, limit: int = 10) -> List[Project]:
        return await self.list_all(limit=limit)

    async def increment_views(self, project_id: int) -> None:
        await self.increment(project_id, "landing_page_views")

    async def increment_downloads(self, project_id: int) -> None:
        await self.increment(project_id, "download_count")
