"""
Build Queue Repository

Queue selection and per-project build lookups.
"""

from typing import List, Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.models import BuildStatus
from app.infrastructure.db.models.build_queue import BuildQueueEntry
from app.infrastructure.db.repositories.base_repository import BaseRepository


class BuildQueueRepository(BaseRepository[BuildQueueEntry]):
    """Repository for build queue entries."""

    def __init__(self, session: AsyncSession):
        super().__init__(BuildQueueEntry, session)

    async def latest_for_project(self, project_id: int) -> Optional[BuildQueueEntry]:
        """The most recently created entry of a project."""
        stmt = (
            select(BuildQueueEntry)
            .where(BuildQueueEntry.project_id == project_id)
            .order_by(BuildQueueEntry.created_at.desc(), BuildQueueEntry.id.desc())
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return result.scalars().first()

    async def claim_next_queued(self) -> Optional[BuildQueueEntry]:
        """
        Select the next queued entry and lock it.

        Order: highest priority, then oldest, then lowest id. Rows locked
        by another worker are skipped, so two workers never claim the
        same entry. SQLite ignores the lock clause.
        """
        stmt = (
            select(BuildQueueEntry)
            .where(BuildQueueEntry.status == BuildStatus.QUEUED.value)
            .order_by(
                BuildQueueEntry.priority.desc(),
                BuildQueueEntry.created_at.asc(),
                BuildQueueEntry.id.asc(),
            )
            .limit(1)
            .with_for_update(skip_locked=True)
        )
        result = await self._session.execute(stmt)
        return result.scalars().first()

    async def recent(self, limit: int = 50) -> List[BuildQueueEntry]:
        return await self.get_all(limit=limit)

    async def count_by_status(self, status: str) -> int:
        stmt = (
            select(func.count())
            .select_from(BuildQueueEntry)
            .where(BuildQueueEntry.status == status)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()
