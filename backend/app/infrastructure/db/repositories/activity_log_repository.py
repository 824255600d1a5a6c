"""
Activity Log Repository

Append and read the audit trail.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.db.models.activity_log import ActivityLog, ActivityLogCreate
from app.infrastructure.db.repositories.base_repository import BaseRepository


class ActivityLogRepository(BaseRepository[ActivityLog]):
    """Repository for activity log entries."""

    def __init__(self, session: AsyncSession):
        super().__init__(ActivityLog, session)

    async def append(self, data: ActivityLogCreate) -> ActivityLog:
        return await self.add(ActivityLog.model_validate(data))

    async def list_logs(
        self,
        user_id: Optional[int] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> List[ActivityLog]:
        """Entries newest first, optionally for one user."""
        stmt = select(ActivityLog)
        if user_id is not None:
            stmt = stmt.where(ActivityLog.user_id == user_id)
        stmt = (
            stmt.order_by(ActivityLog.created_at.desc(), ActivityLog.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())
