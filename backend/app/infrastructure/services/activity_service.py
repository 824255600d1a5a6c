"""
Activity Service

Best-effort audit trail. A failed write never blocks the operation
that triggered it.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.models import ActivityAction
from app.infrastructure.db.models.activity_log import ActivityLog, ActivityLogCreate
from app.infrastructure.db.repositories.activity_log_repository import (
    ActivityLogRepository,
)


logger = logging.getLogger(__name__)


class ActivityService:
    """Writes and reads activity log entries."""

    def __init__(self, session: AsyncSession):
        self._session = session
        self._repo = ActivityLogRepository(session)

    async def log(
        self,
        user_id: Optional[int],
        action: ActivityAction,
        entity_type: Optional[str] = None,
        entity_id: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Append an entry inside a SAVEPOINT.

        On failure only the SAVEPOINT is rolled back; the error is logged
        and swallowed so the surrounding transaction carries on.
        """
        entry = ActivityLogCreate(
            user_id=user_id,
            action=action.value,
            entity_type=entity_type,
            entity_id=entity_id,
            details=details,
        )
        try:
            async with self._session.begin_nested():
                await self._repo.append(entry)
        except Exception as e:
            logger.error(f"[ACTIVITY] Failed to log {action.value} for user {user_id}: {e}")
            return

        logger.debug(f"[ACTIVITY] {action.value} user={user_id} {entity_type}={entity_id}")

    async def list_logs(
        self,
        user_id: Optional[int] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> List[ActivityLog]:
        return await self._repo.list_logs(user_id=user_id, limit=limit, offset=offset)
